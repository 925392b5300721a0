"""
Tests for profile normalization.
"""

import json

import pytest

from linkedin_token import Profile, ProfileParseError, parse_profile
from tests.helpers import FAKE_PROFILE


def test_parse_full_profile(fake_profile_body):
    """Test that every normalized field is populated."""
    profile = parse_profile(fake_profile_body)

    assert isinstance(profile, Profile)
    assert profile.provider == "linkedin"
    assert profile.id == "3C4dtW3rtF"
    assert profile.display_name == "Andrew Orel"
    assert profile.name.family_name == "Orel"
    assert profile.name.given_name == "Andrew"
    assert [email.value for email in profile.emails] == ["somemail@mail.test"]
    assert profile.photos[0].value == FAKE_PROFILE["pictureUrl"]
    assert profile.raw == fake_profile_body
    assert profile.json == FAKE_PROFILE


def test_parse_empty_profile():
    """Test fallbacks for an empty response."""
    profile = parse_profile("{}")

    assert profile.to_dict() == {
        "provider": "linkedin",
        "id": "",
        "displayName": "",
        "name": {"familyName": "", "givenName": ""},
        "emails": [],
        "photos": [{"value": ""}],
        "_raw": "{}",
        "_json": {},
    }


def test_falsy_values_fall_back():
    """Test that null and empty source values become empty strings."""
    profile = parse_profile(json.dumps({
        "id": "abc",
        "formattedName": None,
        "firstName": "",
        "emailAddress": "",
        "pictureUrl": None,
    }))

    assert profile.id == "abc"
    assert profile.display_name == ""
    assert profile.name.given_name == ""
    assert profile.emails == []
    assert len(profile.photos) == 1
    assert profile.photos[0].value == ""


def test_parse_invalid_json():
    """Test that a non JSON body fails with a parse error."""
    with pytest.raises(ProfileParseError) as exc_info:
        parse_profile("not a JSON")

    assert isinstance(exc_info.value, ValueError)
    assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)


@pytest.mark.parametrize("body", ["[]", "null", "42"])
def test_parse_non_object_json(body):
    """Test that JSON documents other than objects are rejected."""
    with pytest.raises(ProfileParseError):
        parse_profile(body)


def test_to_dict_keeps_raw_body(fake_profile_body):
    """Test the camelCase rendering."""
    data = parse_profile(fake_profile_body).to_dict()

    assert data["displayName"] == "Andrew Orel"
    assert data["emails"] == [{"value": "somemail@mail.test"}]
    assert data["_raw"] == fake_profile_body
    assert data["_json"]["headline"] == "Software Engineer"
