"""Data models for the LinkedIn token strategy"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .constants import (
    ACCESS_TOKEN_FIELD,
    AUTHORIZATION_URL,
    DEFAULT_SCOPE,
    DEFAULT_TIMEOUT,
    PROVIDER,
    REFRESH_TOKEN_FIELD,
    TOKEN_URL,
)


@dataclass(frozen=True)
class StrategyOptions:
    """Strategy configuration, fixed at construction

    Attributes:
        client_id: Identifies the client to the LinkedIn application
        client_secret: Secret establishing ownership of the client id
        authorization_url: OAuth authorization endpoint
        token_url: OAuth token endpoint
        scope: LinkedIn permissions the tokens were granted
        profile_fields: Extra profile fields not covered by the scope
        access_token_field: Request parameter holding the access token
        refresh_token_field: Request parameter holding the refresh token
        pass_req_to_callback: Pass the inbound request to the verify callback
        timeout: Profile request timeout in seconds
    """
    client_id: str
    client_secret: str
    authorization_url: str = AUTHORIZATION_URL
    token_url: str = TOKEN_URL
    scope: Tuple[str, ...] = DEFAULT_SCOPE
    profile_fields: Optional[Tuple[str, ...]] = None
    access_token_field: str = ACCESS_TOKEN_FIELD
    refresh_token_field: str = REFRESH_TOKEN_FIELD
    pass_req_to_callback: bool = False
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        if not self.client_id:
            raise ValueError("LinkedInTokenStrategy requires a client_id option")
        if not self.client_secret:
            raise ValueError("LinkedInTokenStrategy requires a client_secret option")
        # Lists are accepted for convenience but stored as tuples
        if isinstance(self.scope, (list, set, frozenset)):
            object.__setattr__(self, "scope", tuple(self.scope))
        if isinstance(self.profile_fields, (list, set, frozenset)):
            object.__setattr__(self, "profile_fields", tuple(self.profile_fields))

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "StrategyOptions":
        """Build options from a plain mapping, ignoring None values

        Raises:
            ValueError: If client_id or client_secret is missing
        """
        data = {key: value for key, value in (data or {}).items() if value is not None}
        return cls(
            client_id=data.pop("client_id", ""),
            client_secret=data.pop("client_secret", ""),
            **data,
        )


@dataclass
class InboundRequest:
    """Framework-neutral view of the request being authenticated

    Attributes:
        body: Parsed body parameters
        query: Query string parameters
        native: The host framework's own request object
    """
    body: Mapping[str, Any] = field(default_factory=dict)
    query: Mapping[str, Any] = field(default_factory=dict)
    native: Any = None

    def param(self, name: str) -> Optional[Any]:
        """Look a parameter up in the body first, then in the query"""
        return (self.body or {}).get(name) or (self.query or {}).get(name) or None


@dataclass
class ProfileName:
    family_name: str = ""
    given_name: str = ""


@dataclass
class ProfileValue:
    value: str = ""


@dataclass
class Profile:
    """Normalized LinkedIn member profile

    Every attribute is always set; missing source values become "" or [].
    """
    id: str = ""
    display_name: str = ""
    name: ProfileName = field(default_factory=ProfileName)
    emails: List[ProfileValue] = field(default_factory=list)
    photos: List[ProfileValue] = field(default_factory=lambda: [ProfileValue()])
    raw: str = ""
    json: Dict[str, Any] = field(default_factory=dict)
    provider: str = PROVIDER

    def to_dict(self) -> Dict[str, Any]:
        """Render the profile with the conventional camelCase keys"""
        return {
            "provider": self.provider,
            "id": self.id,
            "displayName": self.display_name,
            "name": {
                "familyName": self.name.family_name,
                "givenName": self.name.given_name,
            },
            "emails": [{"value": email.value} for email in self.emails],
            "photos": [{"value": photo.value} for photo in self.photos],
            "_raw": self.raw,
            "_json": self.json,
        }


class AuthStatus(str, Enum):
    SUCCESS = "success"
    FAIL = "fail"
    ERROR = "error"


@dataclass
class AuthOutcome:
    """Result of one authentication attempt

    Attributes:
        status: Which channel the host should report on
        user: Verified user (SUCCESS only)
        info: Diagnostic context from the strategy or the verify callback
        error: The fault (ERROR only)
    """
    status: AuthStatus
    user: Any = None
    info: Any = None
    error: Optional[BaseException] = None

    @classmethod
    def succeeded(cls, user: Any, info: Any = None) -> "AuthOutcome":
        return cls(AuthStatus.SUCCESS, user=user, info=info)

    @classmethod
    def failed(cls, info: Any = None) -> "AuthOutcome":
        return cls(AuthStatus.FAIL, info=info)

    @classmethod
    def errored(cls, error: BaseException) -> "AuthOutcome":
        return cls(AuthStatus.ERROR, error=error)
