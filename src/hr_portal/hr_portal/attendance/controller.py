from __future__ import annotations

from functools import wraps

from flask import Flask, jsonify, session

from ..container import Container


def register(app: Flask, container: Container) -> None:
    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "employee_id" not in session:
                return jsonify({"success": False, "message": "Please log in to continue"}), 401
            return view(*args, **kwargs)

        return wrapper

    def _current_employee_id() -> str:
        return str(session["employee_id"])

    @app.route("/attendance/session", methods=["GET"], endpoint="attendance_session")
    @login_required
    def attendance_session():
        status = container.attendance_service.status(_current_employee_id())
        return jsonify({"success": True, "session": status})

    @app.route("/attendance/check-in", methods=["POST"], endpoint="checkin")
    @login_required
    def checkin():
        employee_id = _current_employee_id()
        record = container.attendance_service.check_in(employee_id)
        return jsonify({
            "success": True,
            "message": "Checked in",
            "record": record.to_dict(),
            "session": container.attendance_service.status(employee_id),
        }), 201

    @app.route("/attendance/check-out", methods=["POST"], endpoint="checkout")
    @login_required
    def checkout():
        record = container.attendance_service.check_out(_current_employee_id())
        return jsonify({
            "success": True,
            "message": "Checked out" if record else "Checked out; the attendance record no longer exists",
            "recordMissing": record is None,
            "record": record.to_dict() if record else None,
        })

    @app.route("/attendance/logs", methods=["GET"], endpoint="attendance_logs")
    @login_required
    def attendance_logs():
        rows = container.attendance_service.get_logs_ui(_current_employee_id())
        return jsonify({"success": True, "rows": rows, "can_review": bool(session.get("is_hr"))})

    @app.route("/attendance/<record_id>/approve", methods=["POST"], endpoint="attendance_approve")
    @login_required
    def attendance_approve(record_id: str):
        record = container.attendance_service.approve(record_id, reviewer_id=_current_employee_id())
        return jsonify({"success": True, "message": "Record verified", "record": record.to_dict()})
