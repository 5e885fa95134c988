"""Workforce revenue & profit attribution engine.

This package is organized by feature modules (rates, timelogs, attribution,
placements, reporting, ...) with a thin Flask controller layer over pure
calculators and a report service.
"""
