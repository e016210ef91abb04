"""Identity governance API client package.

To use the API services:
    from iga_client.core.platform import FormAssignmentService, LocaleOverrideService

To load connection settings:
    from iga_client.config import load_settings
"""

__version__ = "0.1.0"
