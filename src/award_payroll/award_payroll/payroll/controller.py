from __future__ import annotations

import logging
from datetime import date

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..common.datetime_utils import parse_iso_date
from ..core.exceptions import DataSourceError, ValidationError
from ..container import Container
from .export import summary_to_csv, summary_to_dict, summary_to_xlsx

logger = logging.getLogger(__name__)

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    def _read_period() -> tuple[str, date, date]:
        organization_id = (request.args.get("organization_id") or "").strip()
        if not organization_id:
            raise ValidationError("organization_id is required")

        start = parse_iso_date(request.args.get("start_date"), "start_date")
        end = parse_iso_date(request.args.get("end_date"), "end_date")
        if start > end:
            raise ValidationError("start_date must not be after end_date")
        return organization_id, start, end

    def _attachment(body: bytes, *, mimetype: str, filename: str):
        return app.response_class(
            body,
            mimetype=mimetype,
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(DataSourceError)
    def handle_data_source_error(e: DataSourceError):
        return jsonify({"success": False, "message": "Failed to load payroll data", "error": str(e)}), 502

    @app.errorhandler(Exception)
    def handle_unexpected_error(e: Exception):
        if isinstance(e, HTTPException):
            return e
        logger.exception("Unhandled error on %s", request.path)
        return jsonify({"success": False, "message": "Internal server error"}), 500

    @app.route("/api/payroll/summary", methods=["GET"], endpoint="payroll_summary")
    def payroll_summary():
        organization_id, start, end = _read_period()
        summary = container.payroll_service.summarize(organization_id, start, end)
        return jsonify({"success": True, "data": summary_to_dict(summary)}), 200

    @app.route("/api/payroll/export/<fmt>", methods=["GET"], endpoint="payroll_export")
    def payroll_export(fmt: str):
        fmt = fmt.lower()
        if fmt not in {"csv", "xlsx", "json"}:
            raise ValidationError("Invalid format")

        organization_id, start, end = _read_period()
        summary = container.payroll_service.summarize(organization_id, start, end)
        filename = f"payroll-{start.isoformat()}-{end.isoformat()}.{fmt}"
        logger.info("Exporting payroll org=%s as %s", organization_id, fmt)

        if fmt == "csv":
            return _attachment(summary_to_csv(summary), mimetype="text/csv", filename=filename)
        if fmt == "xlsx":
            return _attachment(summary_to_xlsx(summary), mimetype=XLSX_MIMETYPE, filename=filename)
        return jsonify({"success": True, "data": summary_to_dict(summary)}), 200
