from __future__ import annotations

from functools import wraps

from flask import Flask, jsonify, request, session

from ..container import Container


def register(app: Flask, container: Container) -> None:
    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "employee_id" not in session:
                return jsonify({"success": False, "message": "Please log in to continue"}), 401
            return view(*args, **kwargs)

        return wrapper

    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True) or request.form
        mode = data.get("mode", "employee")

        if mode == "admin":
            employee = container.auth_service.login_admin(data.get("username", ""), data.get("password", ""))
        else:
            employee = container.auth_service.login_employee(data.get("mobile_number", ""))

        session.clear()
        session["employee_id"] = employee.id
        session["name"] = employee.full_name
        session["is_hr"] = employee.is_hr
        return jsonify({"success": True, "employee": employee.to_dict()})

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True})

    @app.route("/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        employee = container.auth_service.get_employee(session["employee_id"])
        return jsonify({"success": True, "employee": employee.to_dict()})
