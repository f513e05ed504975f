from dataclasses import FrozenInstanceError

import pytest

from ghtf.auth.credentials import AppAuth, Credentials, TokenAuth, select_auth_mode


def test_as_args_contains_all_fields():
    creds = Credentials(owner="acme", token="t", base_url="u", app_id=1, installation_id=2, pem="k")

    assert creds.as_args() == {
        "owner": "acme",
        "token": "t",
        "base_url": "u",
        "app_id": 1,
        "installation_id": 2,
        "pem": "k",
    }


def test_credentials_are_immutable():
    creds = Credentials(owner="acme")
    with pytest.raises(FrozenInstanceError):
        creds.owner = "other"


def test_from_args_fills_missing_fields():
    creds = Credentials.from_args({"owner": "acme", "token": None})

    assert creds == Credentials(owner="acme")


def test_select_token_mode_by_default():
    auth = select_auth_mode(Credentials(owner="acme", token="t", base_url="u"))

    assert isinstance(auth, TokenAuth)
    assert auth.mode == "token"
    assert auth.token == "t"


def test_select_app_mode_when_fully_configured():
    creds = Credentials(owner="acme", token="t", app_id=1, installation_id=2, pem="k")
    auth = select_auth_mode(creds)

    assert isinstance(auth, AppAuth)
    assert auth.mode == "app"
    assert (auth.app_id, auth.installation_id, auth.pem) == (1, 2, "k")


@pytest.mark.parametrize(
    "app_id, installation_id, pem",
    [(0, 2, "k"), (1, 0, "k"), (1, 2, "")],
)
def test_partial_app_config_falls_back_to_token(app_id, installation_id, pem):
    creds = Credentials(owner="acme", app_id=app_id, installation_id=installation_id, pem=pem)
    auth = select_auth_mode(creds)

    assert isinstance(auth, TokenAuth)
    assert auth.token == ""
