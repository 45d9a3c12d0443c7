"""Build validated records from JSON-like payloads.

Payload keys use the persisted (camelCase) field names.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..common.ids import IdFactory, new_id
from ..common.validators import (
    optional_text,
    require_date,
    require_email,
    require_non_empty,
    require_non_negative_amount,
)
from .department_model import Department
from .model import Employee


def _resolve_id(payload: Mapping[str, Any], id_factory: IdFactory, id_override: Optional[str]) -> str:
    if id_override is not None:
        return require_non_empty(id_override, "id")
    raw = payload.get("id")
    if raw is None or raw == "":
        return id_factory()
    return require_non_empty(raw, "id")


def build_employee(
    payload: Mapping[str, Any],
    *,
    id_factory: IdFactory = new_id,
    id_override: Optional[str] = None,
) -> Employee:
    return Employee(
        id=_resolve_id(payload, id_factory, id_override),
        name=require_non_empty(payload.get("name"), "Name"),
        email=require_email(payload.get("email")),
        position=require_non_empty(payload.get("position"), "Position"),
        department_id=require_non_empty(payload.get("departmentId"), "Department"),
        salary=require_non_negative_amount(payload.get("salary"), "Salary"),
        hire_date=require_date(payload.get("hireDate"), "Hire date"),
        avatar=optional_text(payload.get("avatar")),
    )


def build_department(payload: Mapping[str, Any], *, id_factory: IdFactory = new_id) -> Department:
    return Department(
        id=_resolve_id(payload, id_factory, None),
        name=require_non_empty(payload.get("name"), "Department name"),
        manager_id=optional_text(payload.get("managerId")),
        description=optional_text(payload.get("description")) or "",
    )
