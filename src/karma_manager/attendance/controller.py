from __future__ import annotations

import io
import logging
from datetime import date, timedelta

from flask import Flask, jsonify, request, send_file
from werkzeug.exceptions import NotFound

from ..common.datetime_utils import format_timestamp, parse_iso_date
from ..core.constants import DEFAULT_REPORT_DAYS
from ..core.enums import PersonKind
from ..core.exceptions import PunchCooldownError, UnknownPersonError, ValidationError
from ..container import Container
from ..reports.service import write_report_csv
from .badge import Badge, decode_badge, render_badge_png
from .service import PunchOutcome

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _parse_kind(value: str) -> PersonKind:
        try:
            return PersonKind(value)
        except ValueError:
            raise NotFound(f"Unknown population: {value}") from None

    def _parse_date(value: str, field_name: str) -> date:
        try:
            return parse_iso_date(value)
        except ValueError:
            raise ValidationError(f"{field_name} must be YYYY-MM-DD") from None

    def _error(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    def _punch_response(outcome: PunchOutcome):
        return jsonify(
            {
                "success": True,
                "direction": outcome.direction.value,
                "action": outcome.action,
                "message": outcome.message,
                "record": outcome.record.to_dict() if outcome.record else None,
            }
        ), 200

    def _punch(client_id: str, kind: PersonKind, person_id: str):
        try:
            outcome = container.attendance_service.punch(client_id, kind, person_id)
            return _punch_response(outcome)
        except UnknownPersonError as e:
            return _error(str(e), 404)
        except PunchCooldownError as e:
            return _error(str(e), 429)
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            logger.exception("Punch failed", extra={"tenant_id": client_id, "person_id": person_id})
            return _error("Attendance system error", 500)

    @app.route("/api/clients/<client_id>/<kind>/punch", methods=["POST"], endpoint="punch")
    def punch(client_id: str, kind: str):
        data = request.get_json(silent=True) or {}
        person_id = str(data.get("person_id", "")).strip()
        if not person_id:
            return _error("person_id is required", 400)
        return _punch(client_id, _parse_kind(kind), person_id)

    @app.route("/api/clients/<client_id>/kiosk/scan", methods=["POST"], endpoint="kiosk_scan")
    def kiosk_scan(client_id: str):
        """QR kiosk punch: the direction is decided from the day's record."""
        data = request.get_json(silent=True) or {}
        try:
            badge = decode_badge(str(data.get("qr_code", "")))
        except ValidationError as e:
            return _error(str(e), 400)
        if badge.tenant_id != client_id:
            return _error("QR code belongs to another organization", 400)
        return _punch(client_id, badge.kind, badge.person_id)

    @app.route("/api/clients/<client_id>/<kind>/<person_id>/badge.png", endpoint="badge_image")
    def badge_image(client_id: str, kind: str, person_id: str):
        person_kind = _parse_kind(kind)
        ctx = container.tenants.get(client_id)
        if not ctx.directory(person_kind).get_by_id(person_id):
            return _error(f"Unknown person: {person_id}", 404)
        png = render_badge_png(Badge(tenant_id=client_id, kind=person_kind, person_id=person_id))
        return send_file(io.BytesIO(png), mimetype="image/png")

    @app.route("/api/clients/<client_id>/<kind>/attendance", methods=["GET"], endpoint="day_log")
    def day_log(client_id: str, kind: str):
        person_kind = _parse_kind(kind)
        try:
            day = _parse_date(request.args["date"], "date") if request.args.get("date") else None
        except ValidationError as e:
            return _error(str(e), 400)
        rows = container.attendance_service.today_log(client_id, person_kind, day)
        return jsonify({"success": True, "rows": rows}), 200

    def _today(client_id: str, kind: PersonKind) -> date:
        return container.tenants.get(client_id).ledger(kind).now().date()

    def _report_range(today: date) -> tuple[date, date]:
        start_s = request.args.get("start")
        end_s = request.args.get("end")
        start = _parse_date(start_s, "start") if start_s else today - timedelta(days=DEFAULT_REPORT_DAYS)
        end = _parse_date(end_s, "end") if end_s else today
        return start, end

    @app.route("/api/clients/<client_id>/<kind>/report", methods=["GET"], endpoint="report")
    def report(client_id: str, kind: str):
        person_kind = _parse_kind(kind)
        try:
            start, end = _report_range(_today(client_id, person_kind))
            data = container.report_service.build_report(tenant_id=client_id, kind=person_kind, start=start, end=end)
        except ValidationError as e:
            return _error(str(e), 400)
        return jsonify({"success": True, "rows": data.rows, "summary": data.summary}), 200

    @app.route("/api/clients/<client_id>/<kind>/report.csv", methods=["GET"], endpoint="report_csv")
    def report_csv(client_id: str, kind: str):
        person_kind = _parse_kind(kind)
        try:
            start, end = _report_range(_today(client_id, person_kind))
            data = container.report_service.build_report(tenant_id=client_id, kind=person_kind, start=start, end=end)
        except ValidationError as e:
            return _error(str(e), 400)

        filename = f"attendance_report_{_today(client_id, person_kind).strftime('%Y-%m-%d')}.csv"
        return app.response_class(
            write_report_csv(data),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/clients/<client_id>/students/<student_id>/notifications", methods=["GET"], endpoint="guardian_notifications")
    def guardian_notifications(client_id: str, student_id: str):
        # Opening the tenant attaches the notifier to its student ledger.
        container.tenants.get(client_id)
        messages = container.guardian_notifier.drain(client_id, student_id)
        return jsonify(
            {
                "success": True,
                "messages": [
                    {
                        "title": m.title,
                        "message": m.message,
                        "direction": m.direction.value,
                        "at": format_timestamp(m.at),
                    }
                    for m in messages
                ],
            }
        ), 200
