"""Governance and admin API client library.

Architecture:
- filters.py: Query filter formatting (`_queryFilter` expressions)
- descriptors.py: Pure request construction (method, path, params, body)
- client.py: HTTP client with bearer token injection and status handling
- form_assignments.py: Request form assignments (governance API)
- locale_overrides.py: UI locale translation overrides (admin API)
- exceptions.py: Typed exceptions for error handling

Usage:
    # Using service classes
    from iga_client.core.platform import PlatformClient, FormAssignmentService

    client = PlatformClient("https://tenant.example.com/iga", token="...")
    service = FormAssignmentService(client)
    resp = service.get_form_assignment_by_form_id("form-1")

    # Using standalone functions (settings and token read from the environment)
    from iga_client.core.platform import delete_overrides

    delete_overrides("en", fail_on_status_code=False)
"""
from .client import (
    PlatformClient,
    create_client_with_token,
    create_governance_client,
    create_admin_client,
    REQUEST_TIMEOUT,
)
from .descriptors import (
    RequestDescriptor,
    FORMS_PATH,
    UILOCALE_PATH,
)
from .exceptions import (
    PlatformError,
    PlatformAPIError,
    MissingAccessTokenError,
    ConfigurationError,
)
from .form_assignments import (
    FormAssignmentService,
    create_form_assignment,
    delete_form_assignment,
    get_form_assignment_by_workflow_node,
    get_form_assignment_by_form_id,
    get_form_assignment_by_request_type,
    get_form_assignment_by_lcm_operation,
    get_form_request_types,
    get_form_assignment_by_lcm_type_and_operation,
    get_form_lcm_type,
    get_form_applications,
    get_application_request_form_assignment,
)
from .locale_overrides import (
    LocaleOverrideService,
    add_overrides,
    delete_overrides,
)

__all__ = [
    # Client
    "PlatformClient",
    "create_client_with_token",
    "create_governance_client",
    "create_admin_client",
    "REQUEST_TIMEOUT",
    "RequestDescriptor",
    "FORMS_PATH",
    "UILOCALE_PATH",
    
    # Exceptions
    "PlatformError",
    "PlatformAPIError",
    "MissingAccessTokenError",
    "ConfigurationError",
    
    # Services
    "FormAssignmentService",
    "LocaleOverrideService",
    
    # Form assignment functions
    "create_form_assignment",
    "delete_form_assignment",
    "get_form_assignment_by_workflow_node",
    "get_form_assignment_by_form_id",
    "get_form_assignment_by_request_type",
    "get_form_assignment_by_lcm_operation",
    "get_form_request_types",
    "get_form_assignment_by_lcm_type_and_operation",
    "get_form_lcm_type",
    "get_form_applications",
    "get_application_request_form_assignment",
    
    # Locale override functions
    "add_overrides",
    "delete_overrides",
]
