from __future__ import annotations

from flask import Flask

from ..common.api import json_body, json_errors, ok
from ..container import Container
from .hours import compute_shift_hours


def register(app: Flask, container: Container) -> None:
    @app.route("/api/shifts/hours", methods=["POST"], endpoint="shift_hours")
    @json_errors
    def shift_hours():
        body = json_body()
        hours = compute_shift_hours(
            body.get("startTime"),
            body.get("endTime"),
            body.get("breakStartTime") or None,
            body.get("breakEndTime") or None,
        )
        return ok({"shiftHours": float(hours.shift_hours), "breakHours": float(hours.break_hours)})
