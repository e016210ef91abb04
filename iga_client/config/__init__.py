"""Configuration module for the governance API client."""
from .settings import PlatformConfig, load_settings, read_settings

__all__ = ["PlatformConfig", "load_settings", "read_settings"]
