"""Core client logic, independent of any web framework.

Module Structure:
    - platform/  : Governance and admin API client (form assignments, locale overrides)

Import explicitly when needed:
    from iga_client.core.platform import FormAssignmentService, PlatformClient
"""
