"""Configuration module for the Webex connector."""
from .settings import WebexConfig, load_settings

__all__ = ["WebexConfig", "load_settings"]
