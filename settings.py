from config.loader import get_config_loader

# Get the config loader instance
config = get_config_loader()

# Server configuration
PORT = config.get("PORT", 8081)
LOG_LEVEL = config.get("LOG_LEVEL", "info")
BIND_ADDRESS = config.get("BIND_ADDRESS", "0.0.0.0")

# LinkedIn application credentials (required to build the strategy)
LINKEDIN_CLIENT_ID = config.get("LINKEDIN_CLIENT_ID", "")
LINKEDIN_CLIENT_SECRET = config.get("LINKEDIN_CLIENT_SECRET", "")

# Scopes and extra profile fields, comma-separated in the environment
LINKEDIN_SCOPE = config.get("LINKEDIN_SCOPE", ["r_basicprofile"])
LINKEDIN_PROFILE_FIELDS = config.get("LINKEDIN_PROFILE_FIELDS", [])

# Names of the inbound request parameters carrying the tokens
LINKEDIN_ACCESS_TOKEN_FIELD = config.get("LINKEDIN_ACCESS_TOKEN_FIELD", "oauth2_access_token")
LINKEDIN_REFRESH_TOKEN_FIELD = config.get("LINKEDIN_REFRESH_TOKEN_FIELD", "refresh_token")

# Total timeout for the profile request, in seconds
PROFILE_TIMEOUT = config.get("PROFILE_TIMEOUT", 30.0)
