"""
Pydantic models for the authentication endpoint responses.
"""
from typing import Any, Optional
from pydantic import BaseModel


class AuthSuccessResponse(BaseModel):
    """Verified user returned by the verify callback"""
    user: Any
    info: Optional[Any] = None


class AuthFailureResponse(BaseModel):
    """Credentials missing or rejected by the verify callback"""
    detail: Optional[Any] = None


class AuthErrorDetail(BaseModel):
    """Provider, transport or verify callback fault"""
    message: str
    code: Optional[str] = None


class AuthErrorResponse(BaseModel):
    detail: AuthErrorDetail
