"""Core connector logic, independent of any host framework.

Module Structure:
    - webex/ : Webex REST client, fault translation and CRUD driver

Import explicitly when needed:
    from webex_connector.core.webex import WebexDriver, ConnectorError
"""
