"""Query filter construction for the `_queryFilter` parameter.

Values are interpolated verbatim inside double-quoted literals. Nothing is
escaped or URL-encoded here; callers supply safe identifiers.
"""
from __future__ import annotations


# ─────────────────────────────────────────────────────────────────────────────
# Object ID patterns
# ─────────────────────────────────────────────────────────────────────────────
WORKFLOW_PREFIX = "workflow/"
REQUEST_TYPE_PREFIX = "requestType/"
LCM_PREFIX = "lcm/"
APPLICATION_PREFIX = "application/"


def workflow_node_object_id(workflow_id: str, node_id: str) -> str:
    return f"{WORKFLOW_PREFIX}{workflow_id}/node/{node_id}"


def request_type_object_id(request_type_id: str) -> str:
    return f"{REQUEST_TYPE_PREFIX}{request_type_id}"


def lcm_object_id(lcm_type: str, operation: str) -> str:
    """Object ID of a lifecycle management operation, e.g. ``lcm/user/create``."""
    return f"{LCM_PREFIX}{lcm_type}/{operation}"


def lcm_type_prefix(lcm_type: str) -> str:
    return f"{LCM_PREFIX}{lcm_type}/"


def application_create_object_id(application_id: str, object_type: str) -> str:
    """Object ID of the create request form for an application object type."""
    return f"{APPLICATION_PREFIX}{application_id}/{object_type}/create"


# ─────────────────────────────────────────────────────────────────────────────
# Filter expressions
# ─────────────────────────────────────────────────────────────────────────────
def object_id_eq(object_id: str) -> str:
    return f'objectId eq "{object_id}"'


def object_id_co(fragment: str) -> str:
    return f'objectId co "{fragment}"'


def form_id_eq(form_id: str) -> str:
    return f'formId eq "{form_id}"'


def and_(*expressions: str) -> str:
    """Join filter expressions with ``and``.
    
    Raises:
        ValueError: If no expression is given
    """
    if not expressions:
        raise ValueError("At least one filter expression is required")
    return " and ".join(expressions)


# ─────────────────────────────────────────────────────────────────────────────
# Query shapes used by the form assignment operations
# ─────────────────────────────────────────────────────────────────────────────
def by_workflow_node(workflow_id: str, node_id: str) -> str:
    return object_id_eq(workflow_node_object_id(workflow_id, node_id))


def by_form_id(form_id: str) -> str:
    return form_id_eq(form_id)


def by_request_type(request_type_id: str) -> str:
    return object_id_eq(request_type_object_id(request_type_id))


def by_lcm_operation(lcm_type: str, operation: str) -> str:
    return object_id_eq(lcm_object_id(lcm_type, operation))


def request_types_of_form(form_id: str) -> str:
    return and_(object_id_co(REQUEST_TYPE_PREFIX), form_id_eq(form_id))


def lcm_type_of_form(form_id: str, lcm_type: str) -> str:
    return and_(object_id_co(lcm_type_prefix(lcm_type)), form_id_eq(form_id))


def applications_of_form(form_id: str) -> str:
    return and_(object_id_co(APPLICATION_PREFIX), form_id_eq(form_id))


def by_application_create(application_id: str, object_type: str) -> str:
    return object_id_eq(application_create_object_id(application_id, object_type))
