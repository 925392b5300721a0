"""Errors raised while exchanging an access token for a profile"""

from typing import Any, Optional


class InternalOAuthError(Exception):
    """The provider or the transport failed to deliver a profile

    Attributes:
        message: Human readable description
        oauth_error: Provider error code, or the underlying exception when
            the provider sent nothing structured
    """

    def __init__(self, message: str, oauth_error: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.oauth_error = oauth_error

    def __str__(self) -> str:
        if self.oauth_error is not None and not isinstance(self.oauth_error, Exception):
            return f"{self.message} (code: {self.oauth_error})"
        return self.message


class ProfileParseError(ValueError):
    """The profile endpoint answered with a body that is not a JSON object"""
