"""Webex identity connector package.

To use the driver:
    from webex_connector.core.webex import WebexDriver

To load configuration:
    from webex_connector.config import load_settings
"""
