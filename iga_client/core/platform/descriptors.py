"""Request descriptors for governance and admin API calls.

A descriptor captures everything needed to issue one request (method, path,
query parameters, headers, body) without performing any I/O, so request
construction can be checked without a live backend.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from . import filters

FORMS_PATH = "/governance/requestFormAssignments"
UILOCALE_PATH = "/config/uilocale"

JSON_CONTENT_TYPE = "application/json"

ACTION_ASSIGN = "assign"
ACTION_UNASSIGN = "unassign"


@dataclass(frozen=True)
class RequestDescriptor:
    """Transient description of a single HTTP request.
    
    Attributes:
        method: One of GET, POST, PUT, DELETE
        path: Path relative to the API base URL
        query_filter: Value of the `_queryFilter` parameter, if any
        action: Value of the `_action` parameter, if any
        headers: Extra headers (the bearer header is added by the client)
        body: JSON payload, sent unmodified
    """
    method: str
    path: str
    query_filter: Optional[str] = None
    action: Optional[str] = None
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[Any] = None
    
    @property
    def params(self) -> Dict[str, str]:
        """Query string parameters in the order the backend documents them."""
        params: Dict[str, str] = {}
        if self.action is not None:
            params["_action"] = self.action
        if self.query_filter is not None:
            params["_queryFilter"] = self.query_filter
        return params


def _query(query_filter: str) -> RequestDescriptor:
    return RequestDescriptor("GET", FORMS_PATH, query_filter=query_filter)


def _action(action: str, assignment: Any) -> RequestDescriptor:
    return RequestDescriptor(
        "POST",
        FORMS_PATH,
        action=action,
        headers={"content-type": JSON_CONTENT_TYPE},
        body=assignment,
    )


# ─────────────────────────────────────────────────────────────────────────────
# Form assignments
# ─────────────────────────────────────────────────────────────────────────────
def create_form_assignment(assignment: Any) -> RequestDescriptor:
    return _action(ACTION_ASSIGN, assignment)


def delete_form_assignment(assignment: Any) -> RequestDescriptor:
    return _action(ACTION_UNASSIGN, assignment)


def get_form_assignment_by_workflow_node(workflow_id: str, node_id: str) -> RequestDescriptor:
    return _query(filters.by_workflow_node(workflow_id, node_id))


def get_form_assignment_by_form_id(form_id: str) -> RequestDescriptor:
    return _query(filters.by_form_id(form_id))


def get_form_assignment_by_request_type(request_type_id: str) -> RequestDescriptor:
    return _query(filters.by_request_type(request_type_id))


def get_form_assignment_by_lcm_operation(lcm_type: str, operation: str) -> RequestDescriptor:
    return _query(filters.by_lcm_operation(lcm_type, operation))


def get_form_request_types(form_id: str) -> RequestDescriptor:
    return _query(filters.request_types_of_form(form_id))


def get_form_lcm_type(form_id: str, lcm_type: str) -> RequestDescriptor:
    return _query(filters.lcm_type_of_form(form_id, lcm_type))


def get_form_applications(form_id: str) -> RequestDescriptor:
    return _query(filters.applications_of_form(form_id))


def get_application_request_form_assignment(application_id: str, object_type: str) -> RequestDescriptor:
    return _query(filters.by_application_create(application_id, object_type))


# ─────────────────────────────────────────────────────────────────────────────
# Locale overrides
# ─────────────────────────────────────────────────────────────────────────────
def uilocale_path(locale: str) -> str:
    return f"{UILOCALE_PATH}/{locale}"


def add_overrides(locale: str, body: Any) -> RequestDescriptor:
    return RequestDescriptor(
        "PUT",
        uilocale_path(locale),
        headers={"content-type": JSON_CONTENT_TYPE},
        body=body,
    )


def delete_overrides(locale: str) -> RequestDescriptor:
    return RequestDescriptor("DELETE", uilocale_path(locale))
