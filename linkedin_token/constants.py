"""
LinkedIn provider constants
"""
from typing import Dict, Tuple

STRATEGY_NAME = "linkedin-token"
PROVIDER = "linkedin"

# OAuth endpoints (kept for hosts that also run the redirect flow)
AUTHORIZATION_URL = "https://www.linkedin.com/uas/oauth2/authorization"
TOKEN_URL = "https://www.linkedin.com/uas/oauth2/accessToken"

# Profile endpoint, formatted with the comma-joined field list
PROFILE_URL_TEMPLATE = "https://api.linkedin.com/v1/people/~:({fields})?format=json"

DEFAULT_SCOPE: Tuple[str, ...] = ("r_basicprofile",)

# Inbound request parameter names
ACCESS_TOKEN_FIELD = "oauth2_access_token"
REFRESH_TOKEN_FIELD = "refresh_token"

DEFAULT_TIMEOUT = 30.0

# Profile fields readable under each member permission
SCOPE_PROFILE_FIELDS: Dict[str, Tuple[str, ...]] = {
    "r_basicprofile": (
        "id",
        "first-name",
        "last-name",
        "picture-url",
        "picture-urls::(original)",
        "formatted-name",
        "maiden-name",
        "phonetic-first-name",
        "phonetic-last-name",
        "formatted-phonetic-name",
        "headline",
        "location:(name,country:(code))",
        "industry",
        "distance",
        "relation-to-viewer:(distance,connections)",
        "current-share",
        "num-connections",
        "num-connections-capped",
        "summary",
        "specialties",
        "positions",
        "site-standard-profile-request",
        "api-standard-profile-request:(headers,url)",
        "public-profile-url",
    ),
    "r_emailaddress": (
        "email-address",
    ),
    "r_fullprofile": (
        "last-modified-timestamp",
        "proposal-comments",
        "associations",
        "interests",
        "publications",
        "patents",
        "languages",
        "skills",
        "certifications",
        "educations",
        "courses",
        "volunteer",
        "three-current-positions",
        "three-past-positions",
        "num-recommenders",
        "recommendations-received",
        "mfeed-rss-url",
        "following",
        "job-bookmarks",
        "suggestions",
        "date-of-birth",
        "member-url-resources:(name,url)",
        "related-profile-views",
        "honors-awards",
    ),
}
