from __future__ import annotations

import logging

from flask import Flask, request

from ..common.responses import fail, json_body, ok
from ..core.constants import ALL
from ..core.exceptions import ValidationError
from ..container import Container
from .model import Employee, NewEmployee

logger = logging.getLogger(__name__)

_FORM_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "department",
    "position",
    "salary",
    "date_of_joining",
    "date_of_birth",
    "contact_number",
    "emergency_contact",
    "address",
)


def _form_values(data: dict) -> dict:
    values = {name: data.get(name, "") for name in _FORM_FIELDS}
    values["salary"] = data.get("salary", 0)
    return values


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/departments", methods=["GET"], endpoint="list_departments")
    def list_departments():
        return ok(departments=service.departments())

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        department = request.args.get("department", ALL)
        search = request.args.get("search", "")
        return ok(employees=service.filter(department, search))

    @app.route("/api/employees/<int:employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: int):
        employee = service.get(employee_id)
        if not employee:
            return fail("Employee not found", 404)
        return ok(employee=employee)

    @app.route("/api/employees", methods=["POST"], endpoint="add_employee")
    def add_employee():
        try:
            employee = service.add(NewEmployee(**_form_values(json_body())))
            return ok(201, employee=employee)
        except ValidationError as e:
            return fail(str(e))
        except Exception:
            logger.exception("Unexpected error while adding an employee")
            return fail("System error while adding the employee", 500)

    @app.route("/api/employees/<int:employee_id>", methods=["PUT"], endpoint="update_employee")
    def update_employee(employee_id: int):
        try:
            service.update(Employee(employee_id=employee_id, **_form_values(json_body())))
            return ok(employee=service.get(employee_id))
        except ValidationError as e:
            return fail(str(e))
        except Exception:
            logger.exception("Unexpected error while updating employee %s", employee_id)
            return fail("System error while updating the employee", 500)

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(employee_id: int):
        service.delete(employee_id)
        return ok()
