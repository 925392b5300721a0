"""
Shared fixtures for the LinkedIn token strategy tests.
"""

import json

import pytest

from linkedin_token import StrategyOptions
from tests.helpers import FAKE_PROFILE, STRATEGY_CONFIG


@pytest.fixture
def options():
    return StrategyOptions(**STRATEGY_CONFIG)


@pytest.fixture
def fake_profile_body():
    return json.dumps(FAKE_PROFILE)
