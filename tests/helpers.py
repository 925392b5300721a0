"""
Test doubles and sample data for the LinkedIn token strategy tests.
"""

import json

import httpx

from linkedin_token import ProfileFetcher


STRATEGY_CONFIG = {
    "client_id": "123",
    "client_secret": "123",
}

FAKE_PROFILE = {
    "id": "3C4dtW3rtF",
    "formattedName": "Andrew Orel",
    "lastName": "Orel",
    "firstName": "Andrew",
    "emailAddress": "somemail@mail.test",
    "pictureUrl": "https://media.licdn.com/mpr/mprx/0_WTL7meehtpYUJKGId_9KmIUm-0IEMzPII8ArmIoxDV0UQlkwLbz_hwYlplwNV-tFeCFlSsi",
    "headline": "Software Engineer",
}


class StubFetcher(ProfileFetcher):
    """Fetcher returning a canned body or raising a canned error"""

    def __init__(self, body=None, error=None):
        super().__init__("https://api.linkedin.com/v1/people/~:(id)?format=json")
        self.body = json.dumps(FAKE_PROFILE) if body is None else body
        self.error = error
        self.tokens = []

    async def fetch(self, access_token):
        self.tokens.append(access_token)
        if self.error is not None:
            raise self.error
        return self.body


def mock_client(handler):
    """AsyncClient whose requests are answered by handler"""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))
