from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import ValidationError
from .payload import parse_report_request

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"success": True, "base_currency": container.settings.base_currency}), 200

    @app.route("/api/reports/attribution", methods=["POST"], endpoint="api_attribution_report")
    def api_attribution_report():
        """Revenue/cost/profit report over the rows posted in the body."""
        try:
            req = parse_report_request(request.get_json(silent=True))
            report = container.report_service.build_report(
                req.source,
                start=req.start,
                end=req.end,
                fill_empty_months=req.fill_empty_months,
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("attribution report failed")
            return jsonify({"success": False, "message": "Internal error while building report"}), 500

        return jsonify({"success": True, "report": report.to_dict()}), 200
