"""
FastAPI application factory.
"""
import logging
from typing import Optional

from fastapi import FastAPI

from linkedin_token import LinkedInTokenStrategy, Profile
from .dependencies import options_from_settings
from .endpoints import auth_router, health_router
from .middleware import log_requests_middleware

logger = logging.getLogger(__name__)


async def accept_profile(access_token: str, refresh_token: Optional[str], profile: Profile):
    """Default verify callback: every LinkedIn member is a user"""
    return profile.to_dict(), None


def create_app(strategy: Optional[LinkedInTokenStrategy] = None) -> FastAPI:
    """Create the FastAPI application

    Args:
        strategy: Strategy to authenticate with. Built from settings with the
            accept-all verify callback when omitted.
    """
    if strategy is None:
        strategy = LinkedInTokenStrategy(options_from_settings(), accept_profile)

    app = FastAPI(title="LinkedIn Token Auth", version="1.0.0")
    app.state.strategy = strategy

    app.middleware("http")(log_requests_middleware)

    app.include_router(health_router)
    app.include_router(auth_router)

    logger.debug(f"FastAPI application initialized with strategy {strategy.name}")
    return app
