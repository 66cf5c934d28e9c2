"""
HTTP clients for the hosted platform.
"""
from moonfilm.platform.auth import AuthClient
from moonfilm.platform.errors import PlatformError
from moonfilm.platform.management import ManagementClient
from moonfilm.platform.rest import RestClient

__all__ = ["AuthClient", "ManagementClient", "PlatformError", "RestClient"]
