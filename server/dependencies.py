"""
Adapters between Starlette requests and the LinkedIn token strategy.
"""
import json
import logging
from typing import Any, Dict

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

import settings
from linkedin_token import (
    AuthOutcome,
    AuthStatus,
    InboundRequest,
    InternalOAuthError,
    ProfileParseError,
    StrategyOptions,
)
from .models import AuthErrorDetail, AuthErrorResponse, AuthFailureResponse, AuthSuccessResponse

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def options_from_settings() -> StrategyOptions:
    """Build strategy options from the environment-backed settings

    Raises:
        ValueError: If LINKEDIN_CLIENT_ID or LINKEDIN_CLIENT_SECRET is unset
    """
    return StrategyOptions(
        client_id=settings.LINKEDIN_CLIENT_ID,
        client_secret=settings.LINKEDIN_CLIENT_SECRET,
        scope=tuple(settings.LINKEDIN_SCOPE),
        profile_fields=tuple(settings.LINKEDIN_PROFILE_FIELDS) or None,
        access_token_field=settings.LINKEDIN_ACCESS_TOKEN_FIELD,
        refresh_token_field=settings.LINKEDIN_REFRESH_TOKEN_FIELD,
        timeout=settings.PROFILE_TIMEOUT,
    )


async def build_inbound_request(request: Request) -> InboundRequest:
    """Read body and query parameters from a Starlette request

    JSON objects and form payloads populate the body; other payloads leave it
    empty so the token can still come from the query string.
    """
    content_type = request.headers.get("content-type", "")
    body: Dict[str, Any] = {}

    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.debug(f"Ignoring unparseable JSON body: {e}")
            payload = None
        if isinstance(payload, dict):
            body = payload
    elif content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        body = dict(form)

    return InboundRequest(body=body, query=dict(request.query_params), native=request)


def outcome_to_response(outcome: AuthOutcome) -> JSONResponse:
    """Map an authentication outcome onto an HTTP response

    SUCCESS is 200, FAIL is 401. ERROR is 502 when LinkedIn or the profile
    payload is at fault, 500 otherwise.
    """
    if outcome.status is AuthStatus.SUCCESS:
        body = AuthSuccessResponse(user=outcome.user, info=outcome.info)
        return JSONResponse(status_code=200, content=jsonable_encoder(body))

    if outcome.status is AuthStatus.FAIL:
        body = AuthFailureResponse(detail=outcome.info)
        return JSONResponse(status_code=401, content=jsonable_encoder(body))

    error = outcome.error
    if isinstance(error, InternalOAuthError):
        code = error.oauth_error if isinstance(error.oauth_error, str) else None
        detail = AuthErrorDetail(message=error.message, code=code)
        status_code = 502
    elif isinstance(error, ProfileParseError):
        detail = AuthErrorDetail(message=str(error))
        status_code = 502
    else:
        logger.error(f"Authentication failed with unexpected error: {error!r}")
        detail = AuthErrorDetail(message="Internal authentication error")
        status_code = 500
    return JSONResponse(status_code=status_code, content=jsonable_encoder(AuthErrorResponse(detail=detail)))
