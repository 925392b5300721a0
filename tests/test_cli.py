"""
Tests for the command line interface.
"""

import pytest

import settings
from cli.main import main
from linkedin_token import InternalOAuthError, LinkedInTokenStrategy, parse_profile


def test_fields_command(capsys):
    main(["fields", "--scope", "r_emailaddress", "--field", "headline"])

    output = capsys.readouterr().out
    assert "Profile Fields" in output
    assert "headline" in output
    assert "email-address" in output


def test_profile_command(monkeypatch, capsys, fake_profile_body):
    monkeypatch.setattr(settings, "LINKEDIN_CLIENT_ID", "123")
    monkeypatch.setattr(settings, "LINKEDIN_CLIENT_SECRET", "123")

    async def user_profile(self, access_token):
        assert access_token == "token"
        return parse_profile(fake_profile_body)

    monkeypatch.setattr(LinkedInTokenStrategy, "user_profile", user_profile)

    main(["profile", "--token", "token"])

    output = capsys.readouterr().out
    assert "Andrew Orel" in output
    assert "3C4dtW3rtF" in output


def test_profile_command_provider_error(monkeypatch, capsys):
    monkeypatch.setattr(settings, "LINKEDIN_CLIENT_ID", "123")
    monkeypatch.setattr(settings, "LINKEDIN_CLIENT_SECRET", "123")

    async def user_profile(self, access_token):
        raise InternalOAuthError("MESSAGE", "CODE")

    monkeypatch.setattr(LinkedInTokenStrategy, "user_profile", user_profile)

    with pytest.raises(SystemExit) as exc_info:
        main(["profile", "--token", "token"])

    assert exc_info.value.code == 1
    assert "MESSAGE" in capsys.readouterr().out


def test_profile_command_without_credentials(monkeypatch, capsys):
    monkeypatch.setattr(settings, "LINKEDIN_CLIENT_ID", "")

    with pytest.raises(SystemExit):
        main(["profile", "--token", "token"])

    assert "LINKEDIN_CLIENT_ID" in capsys.readouterr().out
