"""Authorized retrieval of the LinkedIn member profile"""

import json
import logging
from typing import Optional

import httpx

from .constants import DEFAULT_TIMEOUT
from .errors import InternalOAuthError

logger = logging.getLogger(__name__)


class ProfileFetcher:
    """Fetches the raw profile document for an access token

    The token travels in the Authorization header, never in the URL.
    """

    def __init__(
        self,
        profile_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Args:
            profile_url: Fully built profile URL including the field list
            timeout: Request timeout in seconds
            client: Shared client to reuse; one is opened per call otherwise
        """
        self.profile_url = profile_url
        self.timeout = timeout
        self.client = client

    async def fetch(self, access_token: str) -> str:
        """Fetch the profile body for an access token

        Args:
            access_token: LinkedIn OAuth2 access token

        Returns:
            The response body, unparsed

        Raises:
            InternalOAuthError: If the request fails or LinkedIn answers with
                an error status
        """
        headers = {"Authorization": f"Bearer {access_token}"}

        try:
            if self.client is not None:
                response = await self.client.get(self.profile_url, headers=headers, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.get(self.profile_url, headers=headers)
        except httpx.TimeoutException as e:
            logger.error(f"Profile request timed out after {self.timeout} seconds: {e}")
            raise InternalOAuthError("Failed to fetch user profile", e) from e
        except httpx.RequestError as e:
            logger.error(f"Profile request failed: {e}")
            raise InternalOAuthError("Failed to fetch user profile", e) from e

        logger.debug(f"Profile response status: {response.status_code}")

        if not response.is_success:
            raise self._error_from_response(response)

        return response.text

    @staticmethod
    def _error_from_response(response: httpx.Response) -> InternalOAuthError:
        """Turn an error response into an InternalOAuthError

        A body of the form {"error": {"message": ..., "code": ...}} keeps the
        provider's message and code, the code being optional. Anything else
        becomes a generic error wrapping the HTTP status error.
        """
        status_error = httpx.HTTPStatusError(
            f"Profile request failed with status {response.status_code}",
            request=response.request,
            response=response,
        )
        try:
            payload = json.loads(response.text)
            error = InternalOAuthError(payload["error"]["message"], payload["error"].get("code"))
        except (json.JSONDecodeError, KeyError, TypeError, AttributeError):
            logger.error(f"Profile request failed with status {response.status_code}: {response.text}")
            error = InternalOAuthError("Failed to fetch user profile", status_error)
        else:
            logger.error(f"LinkedIn rejected profile request: {error}")
        error.__cause__ = status_error
        return error
