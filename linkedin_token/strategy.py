"""LinkedIn access-token authentication strategy

Authenticates requests by exchanging a LinkedIn OAuth2 access token for the
member profile. Applications supply a ``verify`` callback which receives the
access token, refresh token and profile and returns ``(user, info)``. A falsy
user means the credentials are not accepted, and returning None counts as
``(None, None)``. Raising reports an error.

Example:
    async def verify(access_token, refresh_token, profile):
        user = await users.find_or_create(linkedin_id=profile.id)
        return user, None

    strategy = LinkedInTokenStrategy(
        StrategyOptions(client_id="123456789", client_secret="shhh-its-a-secret"),
        verify,
    )
    outcome = await strategy.authenticate(InboundRequest(body=form))
"""

import inspect
import logging
from typing import Any, Awaitable, Callable, Mapping, Optional, Tuple, Union

from .constants import PROFILE_URL_TEMPLATE, STRATEGY_NAME
from .fetcher import ProfileFetcher
from .models import AuthOutcome, InboundRequest, Profile, StrategyOptions
from .profile import parse_profile
from .scopes import scope_to_profile_fields

logger = logging.getLogger(__name__)

VerifyResult = Union[Tuple[Any, Any], Awaitable[Tuple[Any, Any]]]
VerifyCallback = Callable[..., VerifyResult]


class LinkedInTokenStrategy:
    """Token strategy for LinkedIn

    Options:
        client_id           Identifies the client to the LinkedIn application
        client_secret       Secret used to establish ownership of the client id
        scope               LinkedIn scope
        profile_fields      LinkedIn profile fields not included in scope
        pass_req_to_callback  Pass the inbound request to the verify callback
    """

    name = STRATEGY_NAME

    def __init__(
        self,
        options: Union[StrategyOptions, Mapping[str, Any], None],
        verify: VerifyCallback,
        fetcher: Optional[ProfileFetcher] = None,
    ):
        """
        Args:
            options: StrategyOptions or a mapping of the same keys
            verify: Application callback, see the module docstring
            fetcher: Profile fetcher override, mostly for tests

        Raises:
            ValueError: If client_id or client_secret is missing
            TypeError: If verify is not callable
        """
        if not isinstance(options, StrategyOptions):
            options = StrategyOptions.from_mapping(options)
        if not callable(verify):
            raise TypeError("LinkedInTokenStrategy requires a verify callback")

        self.options = options
        self._verify = verify
        self.profile_url = PROFILE_URL_TEMPLATE.format(
            fields=scope_to_profile_fields(options.scope, options.profile_fields)
        )
        self.fetcher = fetcher or ProfileFetcher(self.profile_url, timeout=options.timeout)

        if options.pass_req_to_callback:
            self._call_verify = self._verify_with_request
        else:
            self._call_verify = self._verify_without_request

    async def authenticate(self, request: InboundRequest) -> AuthOutcome:
        """Authenticate one request

        Args:
            request: Body and query parameters of the inbound request

        Returns:
            AuthOutcome on the success, fail or error channel
        """
        access_token = request.param(self.options.access_token_field)
        # Only passed through to the verify callback
        refresh_token = request.param(self.options.refresh_token_field)

        if not access_token:
            logger.debug(f"No {self.options.access_token_field} in request body or query")
            return AuthOutcome.failed({"message": f"You should provide {self.options.access_token_field}"})

        try:
            profile = await self.user_profile(access_token)
        except Exception as e:
            logger.warning(f"Could not load LinkedIn profile: {e}")
            return AuthOutcome.errored(e)

        try:
            user, info = await self._call_verify(request, access_token, refresh_token, profile)
        except Exception as e:
            logger.warning(f"Verify callback raised for LinkedIn member {profile.id!r}: {e}")
            return AuthOutcome.errored(e)

        if not user:
            logger.info(f"Verify callback rejected LinkedIn member {profile.id!r}")
            return AuthOutcome.failed(info)

        logger.info(f"Authenticated LinkedIn member {profile.id!r}")
        return AuthOutcome.succeeded(user, info)

    async def user_profile(self, access_token: str) -> Profile:
        """Fetch and normalize the profile for an access token

        Raises:
            InternalOAuthError: If LinkedIn or the transport fails
            ProfileParseError: If the response body is not a JSON object
        """
        body = await self.fetcher.fetch(access_token)
        return parse_profile(body)

    async def _verify_without_request(self, request, access_token, refresh_token, profile):
        return await _resolve(self._verify(access_token, refresh_token, profile))

    async def _verify_with_request(self, request, access_token, refresh_token, profile):
        return await _resolve(self._verify(request, access_token, refresh_token, profile))


async def _resolve(result: VerifyResult) -> Tuple[Any, Any]:
    """Await the verify result when the callback is a coroutine function"""
    if inspect.isawaitable(result):
        result = await result
    if result is None:
        return None, None
    return result
