from __future__ import annotations

import logging
from typing import Optional


class Diagnostics:
    """Per-request accumulator for figures that silently resolved to zero.

    Calculators never raise on bad business data; they record a message here so
    a zeroed figure can be told apart from genuinely-zero revenue.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)
        self._messages: list[str] = []
        self._seen: set[str] = set()

    def warn(self, message: str) -> None:
        # The same bad assignment is priced once per log line; report it once.
        if message in self._seen:
            return
        self._seen.add(message)
        self._messages.append(message)
        self._logger.warning(message)

    @property
    def warnings(self) -> list[str]:
        return list(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __bool__(self) -> bool:
        return bool(self._messages)


def warn(diagnostics: Optional[Diagnostics], message: str) -> None:
    """Record on ``diagnostics`` when given; calculators accept ``None``."""
    if diagnostics is not None:
        diagnostics.warn(message)
