"""Normalization of LinkedIn profile responses"""

import json
import logging

from .errors import ProfileParseError
from .models import Profile, ProfileName, ProfileValue

logger = logging.getLogger(__name__)


def parse_profile(body: str) -> Profile:
    """Parse a LinkedIn profile response into a normalized Profile

    Args:
        body: Raw response body from the profile endpoint

    Returns:
        Profile with every field populated, using "" or [] for anything the
        provider left out

    Raises:
        ProfileParseError: If the body is not a JSON object
    """
    try:
        data = json.loads(body)
    except (TypeError, json.JSONDecodeError) as e:
        logger.debug(f"Profile body is not valid JSON: {e}")
        raise ProfileParseError(f"Failed to parse user profile: {e}") from e

    if not isinstance(data, dict):
        raise ProfileParseError(f"Expected a JSON object for user profile, got {type(data).__name__}")

    email = data.get("emailAddress")

    return Profile(
        id=data.get("id") or "",
        display_name=data.get("formattedName") or "",
        name=ProfileName(
            family_name=data.get("lastName") or "",
            given_name=data.get("firstName") or "",
        ),
        emails=[ProfileValue(email)] if email else [],
        photos=[ProfileValue(data.get("pictureUrl") or "")],
        raw=body,
        json=data,
    )
