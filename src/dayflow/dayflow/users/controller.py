from __future__ import annotations

import logging

from flask import Flask, g, request

from ..common.http import date_field, fail, ok, payload
from ..core.enums import Role
from ..core.exceptions import AccountNotFoundError, AuthenticationError, ValidationError
from ..sessions.guards import make_guards
from ..sessions.model import SignupData
from .model import NewAccount

logger = logging.getLogger(__name__)

# JSON (camelCase) -> Account attribute
PROFILE_FIELDS = {
    "id": "id",
    "employeeId": "employee_id",
    "email": "email",
    "firstName": "first_name",
    "lastName": "last_name",
    "role": "role",
    "department": "department",
    "position": "position",
    "phone": "phone",
    "address": "address",
    "joinDate": "join_date",
    "profilePicture": "profile_picture_ref",
}


def _profile_changes(data: dict) -> dict:
    changes = {}
    for key, value in data.items():
        if key in {"fullName", "isVerified"}:
            continue
        if key not in PROFILE_FIELDS:
            raise ValidationError(f"Unknown or read-only field: {key}")
        changes[PROFILE_FIELDS[key]] = value
    return changes


def register(app: Flask, container) -> None:
    sessions, login_required, admin_required = make_guards(container)

    @app.route("/auth/login", methods=["POST"], endpoint="login")
    def login():
        data = payload()
        try:
            account = sessions().login(str(data.get("email", "")), str(data.get("password", "")))
        except (AccountNotFoundError, AuthenticationError) as e:
            return fail(str(e), 401)
        return ok(account.public_view())

    @app.route("/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        sessions().logout()
        return ok()

    @app.route("/auth/signup", methods=["POST"], endpoint="signup")
    def signup():
        data = payload()
        account = sessions().signup(
            SignupData(
                employee_id=str(data.get("employeeId", "")),
                email=str(data.get("email", "")),
                password=str(data.get("password", "")),
                first_name=str(data.get("firstName", "")),
                last_name=str(data.get("lastName", "")),
                role=str(data.get("role") or Role.EMPLOYEE.value),
                confirm_password=data.get("confirmPassword"),
            )
        )
        logger.info("New account %s registered, awaiting verification", account.id)
        return ok(account.public_view(), 201, message="Account created. Please verify your email.")

    @app.route("/auth/verify", methods=["POST"], endpoint="verify_email")
    def verify_email():
        account = sessions().verify_email(str(payload().get("email", "")))
        return ok(account.public_view())

    @app.route("/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        return ok(g.current_user.public_view())

    @app.route("/me", methods=["PATCH"], endpoint="update_me")
    @login_required
    def update_me():
        account = sessions().update_profile(_profile_changes(payload()))
        return ok(account.public_view())

    @app.route("/admin/employees", methods=["GET"], endpoint="admin_employees")
    @admin_required
    def admin_employees():
        role = request.args.get("role")
        try:
            role_filter = Role(role) if role and role != "all" else None
        except ValueError:
            raise ValidationError("Invalid role")
        accounts = container.directory.list_accounts(role=role_filter, search=request.args.get("search"))
        return ok([a.public_view() for a in accounts])

    @app.route("/admin/employees", methods=["POST"], endpoint="add_employee")
    @admin_required
    def add_employee():
        data = payload()
        try:
            role = Role(data.get("role") or Role.EMPLOYEE.value)
        except ValueError:
            raise ValidationError("Invalid role")

        account = container.directory.create(
            NewAccount(
                employee_id=str(data.get("employeeId", "")),
                email=str(data.get("email", "")),
                password=str(data.get("password", "")),
                first_name=str(data.get("firstName", "")),
                last_name=str(data.get("lastName", "")),
                role=role,
                department=str(data.get("department", "")),
                position=str(data.get("position", "")),
                phone=str(data.get("phone", "")),
                address=str(data.get("address", "")),
                join_date=date_field(data.get("joinDate"), "Join date") if data.get("joinDate") else None,
            ),
            provisioned_by_admin=True,
        )
        return ok(account.public_view(), 201)

    @app.route("/admin/employees/<account_id>", methods=["DELETE"], endpoint="delete_employee")
    @admin_required
    def delete_employee(account_id: str):
        if str(account_id) == g.current_user.id:
            raise ValidationError("You cannot delete your own account")
        container.directory.delete(account_id)
        return ok()
