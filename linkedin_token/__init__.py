"""LinkedIn access-token authentication strategy

Exchanges an OAuth2 access token presented by a client for the LinkedIn member
profile and hands a normalized profile to an application verify callback.
"""

from .constants import PROVIDER, SCOPE_PROFILE_FIELDS, STRATEGY_NAME
from .errors import InternalOAuthError, ProfileParseError
from .fetcher import ProfileFetcher
from .models import (
    AuthOutcome,
    AuthStatus,
    InboundRequest,
    Profile,
    ProfileName,
    ProfileValue,
    StrategyOptions,
)
from .profile import parse_profile
from .scopes import scope_to_profile_fields
from .strategy import LinkedInTokenStrategy

__version__ = "1.0.0"

__all__ = [
    "PROVIDER",
    "SCOPE_PROFILE_FIELDS",
    "STRATEGY_NAME",
    "InternalOAuthError",
    "ProfileParseError",
    "ProfileFetcher",
    "AuthOutcome",
    "AuthStatus",
    "InboundRequest",
    "Profile",
    "ProfileName",
    "ProfileValue",
    "StrategyOptions",
    "parse_profile",
    "scope_to_profile_fields",
    "LinkedInTokenStrategy",
]
