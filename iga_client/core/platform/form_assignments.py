"""Request form assignment operations (governance API).

A form assignment links a UI form to a workflow node, a request type, a
lifecycle management (LCM) operation or an application object type. The
backend keys these links by an `objectId` such as ``workflow/{id}/node/{id}``
or ``lcm/user/create``.
"""
from __future__ import annotations
from typing import Any, Optional

import requests

from . import descriptors
from .client import PlatformClient, create_governance_client


class FormAssignmentService:
    """Service for reading and changing request form assignments."""

    def __init__(self, client: PlatformClient):
        """Initialize form assignment service.

        Args:
            client: Client bound to the governance API base URL
        """
        self.client = client

    def create_form_assignment(self, assignment: Any, access_token: Optional[str] = None) -> requests.Response:
        """Assign a form.

        Args:
            assignment: Assignment object, sent unmodified as the JSON body
            access_token: Bearer token overriding the client default

        Returns:
            Response of the `_action=assign` call
        """
        return self.client.send(descriptors.create_form_assignment(assignment), access_token)

    def delete_form_assignment(self, assignment: Any, access_token: Optional[str] = None) -> requests.Response:
        """Remove a form assignment.

        Args:
            assignment: Assignment object to remove, sent unmodified
            access_token: Bearer token overriding the client default
        """
        return self.client.send(descriptors.delete_form_assignment(assignment), access_token)

    def get_form_assignment_by_workflow_node(
        self, workflow_id: str, node_id: str, access_token: Optional[str] = None
    ) -> requests.Response:
        """Retrieve the form assignment of a workflow node.

        Args:
            workflow_id: Workflow ID
            node_id: Node ID within the workflow
            access_token: Bearer token overriding the client default
        """
        return self.client.send(
            descriptors.get_form_assignment_by_workflow_node(workflow_id, node_id), access_token
        )

    def get_form_assignment_by_form_id(self, form_id: str, access_token: Optional[str] = None) -> requests.Response:
        """Retrieve all assignments of a form."""
        return self.client.send(descriptors.get_form_assignment_by_form_id(form_id), access_token)

    def get_form_assignment_by_request_type(
        self, request_type_id: str, access_token: Optional[str] = None
    ) -> requests.Response:
        """Retrieve the form assignment of a request type."""
        return self.client.send(descriptors.get_form_assignment_by_request_type(request_type_id), access_token)

    def get_form_assignment_by_lcm_operation(
        self, lcm_type: str, operation: str, access_token: Optional[str] = None
    ) -> requests.Response:
        """Retrieve the form assignment of an LCM operation.

        Args:
            lcm_type: Lifecycle management type (e.g. "user")
            operation: Operation within the type (e.g. "create", "update")
            access_token: Bearer token overriding the client default
        """
        return self.client.send(descriptors.get_form_assignment_by_lcm_operation(lcm_type, operation), access_token)

    def get_form_request_types(self, form_id: str, access_token: Optional[str] = None) -> requests.Response:
        """Retrieve the request type assignments of a form."""
        return self.client.send(descriptors.get_form_request_types(form_id), access_token)

    def get_form_assignment_by_lcm_type_and_operation(
        self, lcm_type: str, operation: str, access_token: Optional[str] = None
    ) -> requests.Response:
        """Retrieve the form assignment of an LCM type and operation.

        Issues the same query as get_form_assignment_by_lcm_operation.
        """
        return self.client.send(descriptors.get_form_assignment_by_lcm_operation(lcm_type, operation), access_token)

    def get_form_lcm_type(self, form_id: str, lcm_type: str, access_token: Optional[str] = None) -> requests.Response:
        """Retrieve the assignments of a form to any operation of an LCM type."""
        return self.client.send(descriptors.get_form_lcm_type(form_id, lcm_type), access_token)

    def get_form_applications(self, form_id: str, access_token: Optional[str] = None) -> requests.Response:
        """Retrieve the application assignments of a form."""
        return self.client.send(descriptors.get_form_applications(form_id), access_token)

    def get_application_request_form_assignment(
        self, application_id: str, object_type: str, access_token: Optional[str] = None
    ) -> requests.Response:
        """Retrieve the create request form of an application object type.

        Args:
            application_id: Application ID
            object_type: Connector object type (e.g. "user")
            access_token: Bearer token overriding the client default
        """
        return self.client.send(
            descriptors.get_application_request_form_assignment(application_id, object_type), access_token
        )


# ─────────────────────────────────────────────────────────────────────────────
# Standalone functions
# A client is built from settings on every call so the default token is
# resolved at call time.
# ─────────────────────────────────────────────────────────────────────────────
def _service() -> FormAssignmentService:
    return FormAssignmentService(create_governance_client())


def create_form_assignment(assignment: Any, access_token: Optional[str] = None) -> requests.Response:
    """Assign a form."""
    return _service().create_form_assignment(assignment, access_token)


def delete_form_assignment(assignment: Any, access_token: Optional[str] = None) -> requests.Response:
    """Remove a form assignment."""
    return _service().delete_form_assignment(assignment, access_token)


def get_form_assignment_by_workflow_node(
    workflow_id: str, node_id: str, access_token: Optional[str] = None
) -> requests.Response:
    """Retrieve the form assignment of a workflow node."""
    return _service().get_form_assignment_by_workflow_node(workflow_id, node_id, access_token)


def get_form_assignment_by_form_id(form_id: str, access_token: Optional[str] = None) -> requests.Response:
    """Retrieve all assignments of a form."""
    return _service().get_form_assignment_by_form_id(form_id, access_token)


def get_form_assignment_by_request_type(request_type_id: str, access_token: Optional[str] = None) -> requests.Response:
    """Retrieve the form assignment of a request type."""
    return _service().get_form_assignment_by_request_type(request_type_id, access_token)


def get_form_assignment_by_lcm_operation(
    lcm_type: str, operation: str, access_token: Optional[str] = None
) -> requests.Response:
    """Retrieve the form assignment of an LCM operation."""
    return _service().get_form_assignment_by_lcm_operation(lcm_type, operation, access_token)


def get_form_request_types(form_id: str, access_token: Optional[str] = None) -> requests.Response:
    """Retrieve the request type assignments of a form."""
    return _service().get_form_request_types(form_id, access_token)


def get_form_assignment_by_lcm_type_and_operation(
    lcm_type: str, operation: str, access_token: Optional[str] = None
) -> requests.Response:
    """Retrieve the form assignment of an LCM type and operation."""
    return _service().get_form_assignment_by_lcm_type_and_operation(lcm_type, operation, access_token)


def get_form_lcm_type(form_id: str, lcm_type: str, access_token: Optional[str] = None) -> requests.Response:
    """Retrieve the assignments of a form to an LCM type."""
    return _service().get_form_lcm_type(form_id, lcm_type, access_token)


def get_form_applications(form_id: str, access_token: Optional[str] = None) -> requests.Response:
    """Retrieve the application assignments of a form."""
    return _service().get_form_applications(form_id, access_token)


def get_application_request_form_assignment(
    application_id: str, object_type: str, access_token: Optional[str] = None
) -> requests.Response:
    """Retrieve the create request form of an application object type."""
    return _service().get_application_request_form_assignment(application_id, object_type, access_token)
