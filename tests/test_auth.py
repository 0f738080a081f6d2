from __future__ import annotations

from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest

from formdesk.infrastructure.auth import StaticTokenAuthenticator, extract_bearer_token


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        ("Bearer secret", True),
        ("Bearer wrong", False),
        ("bearer secret", False),
        ("Bearer  secret", False),
        ("Bearer secret ", False),
        ("Basic secret", False),
        ("secret", False),
        ("Bearer ", False),
        ("", False),
        (None, False),
    ],
)
def test_static_token_authenticator(header, expected):
    assert StaticTokenAuthenticator("secret").authenticate(header) is expected


def test_empty_secret_never_authenticates():
    authenticator = StaticTokenAuthenticator("")

    assert authenticator.authenticate("Bearer ") is False
    assert authenticator.authenticate("Bearer anything") is False


def test_extract_bearer_token():
    assert extract_bearer_token("Bearer abc") == "abc"
    assert extract_bearer_token("Token abc") is None
    assert extract_bearer_token(None) is None
