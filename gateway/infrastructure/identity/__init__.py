from .auth0_client import Auth0ManagementClient, ManagementTokenClient
from .token_cache import AccessTokenCache

__all__ = ["AccessTokenCache", "Auth0ManagementClient", "ManagementTokenClient"]
