import pytest

from ghtf.auth.resolver import ConfigResolver, resolve_credentials
from ghtf.constants import (
    DEFAULT_BASE_URL,
    ENV_APP_ID,
    ENV_APP_INSTALLATION_ID,
    ENV_APP_PEM_FILE,
    ENV_TOKEN,
)
from ghtf.exceptions import (
    ConfigError,
    INVALID_NUMERIC_ENV,
    MISSING_OWNER,
    TOKEN_REQUIREMENT,
)


def test_owner_and_token_from_args():
    creds = resolve_credentials(["acme", "tok123"], env={})

    assert creds.owner == "acme"
    assert creds.token == "tok123"
    assert creds.base_url == ""
    assert creds.app_id == 0
    assert creds.installation_id == 0
    assert creds.pem == ""


def test_token_from_env_when_not_passed():
    creds = resolve_credentials(["acme"], env={"GITHUB_TOKEN": "envtok"})
    assert creds.token == "envtok"


def test_positional_token_wins_over_env():
    creds = resolve_credentials(["acme", "argtok"], env={"GITHUB_TOKEN": "envtok"})
    assert creds.token == "argtok"


def test_positional_empty_token_taken_verbatim():
    creds = resolve_credentials(["acme", ""], env={"GITHUB_TOKEN": "envtok"})
    assert creds.token == ""


def test_missing_token_raises():
    with pytest.raises(ConfigError) as exc:
        resolve_credentials(["acme"], env={})

    assert exc.value.reason == TOKEN_REQUIREMENT
    assert "token requirement" in str(exc.value)


def test_empty_env_token_raises():
    with pytest.raises(ConfigError) as exc:
        resolve_credentials(["acme"], env={"GITHUB_TOKEN": ""})

    assert exc.value.reason == TOKEN_REQUIREMENT


@pytest.mark.parametrize("args", [[], [""]])
def test_missing_owner_raises(args):
    with pytest.raises(ConfigError) as exc:
        resolve_credentials(args, env={"GITHUB_TOKEN": "t"})

    assert exc.value.reason == MISSING_OWNER


def test_base_url_used_when_given():
    creds = resolve_credentials(["acme", "t", "https://ghe.example.com/api/v3/"], env={})
    assert creds.base_url == "https://ghe.example.com/api/v3/"


def test_empty_base_url_falls_back_to_default():
    creds = resolve_credentials(["acme", "t", ""], env={})
    assert creds.base_url == DEFAULT_BASE_URL


def test_base_url_left_empty_without_third_arg():
    creds = resolve_credentials(["acme", "t"], env={})
    assert creds.base_url == ""


def test_app_env_values_parsed():
    env = {
        "GITHUB_APP_ID": "12345",
        "GITHUB_APP_INSTALLATION_ID": "-7",
        "GITHUB_APP_PEM_FILE": "pem",
    }
    creds = resolve_credentials(["acme", "t"], env=env)

    assert creds.app_id == 12345
    assert creds.installation_id == -7
    assert creds.pem == "pem"


@pytest.mark.parametrize(
    "name", ["APP_ID", "APP_INSTALLATION_ID", "GITHUB_APP_ID", "GITHUB_APP_INSTALLATION_ID"]
)
@pytest.mark.parametrize("value", ["abc", "", "1.5", " 1", "1_000", "9223372036854775808"])
def test_malformed_numeric_env_raises(name, value):
    with pytest.raises(ConfigError) as exc:
        resolve_credentials(["acme", "t"], env={name: value})

    assert exc.value.reason == INVALID_NUMERIC_ENV
    assert name in str(exc.value)


def test_numeric_env_checked_before_owner():
    with pytest.raises(ConfigError) as exc:
        resolve_credentials([], env={"GITHUB_APP_ID": "x"})

    assert exc.value.reason == INVALID_NUMERIC_ENV


def test_pem_escaped_newlines_are_expanded():
    env = {"GITHUB_APP_PEM_FILE": "-----BEGIN KEY-----\\nABC\\n-----END KEY-----"}
    creds = resolve_credentials(["acme", "t"], env=env)

    assert creds.pem == "-----BEGIN KEY-----\nABC\n-----END KEY-----"
    assert "\\n" not in creds.pem


def test_resolver_defaults_to_process_environment(monkeypatch):
    for name in ENV_TOKEN + ENV_APP_ID + ENV_APP_INSTALLATION_ID + ENV_APP_PEM_FILE:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("TOKEN", "from-process")

    creds = ConfigResolver().resolve(["acme"])
    assert creds.token == "from-process"


def test_resolve_logs_success(mocker):
    log_event = mocker.patch("ghtf.auth.resolver.log_authentication_event")

    resolve_credentials(["acme", "t"], env={})

    log_event.assert_called_once()
    args, _ = log_event.call_args
    assert args[0] == "token"
    assert args[1] is True


def test_resolve_logs_failure(mocker):
    log_event = mocker.patch("ghtf.auth.resolver.log_authentication_event")

    with pytest.raises(ConfigError):
        resolve_credentials(["acme"], env={})

    args, _ = log_event.call_args
    assert args[1] is False
    assert args[2] == {"reason": TOKEN_REQUIREMENT}


def test_full_app_configuration(app_env):
    creds = resolve_credentials(["acme"], env={**app_env, "GITHUB_TOKEN": "envtok"})

    assert creds.app_id == 1
    assert creds.installation_id == 2
    assert creds.pem.splitlines() == ["-----BEGIN KEY-----", "ABC", "-----END KEY-----"]
    assert creds.token == "envtok"


def test_token_from_unprefixed_env():
    creds = resolve_credentials(["acme"], env={"TOKEN": "t"})

    assert creds.token == "t"
    assert creds.owner == "acme"


def test_app_settings_from_unprefixed_env():
    env = {"TOKEN": "t", "APP_ID": "1", "APP_INSTALLATION_ID": "2", "APP_PEM_FILE": "x"}
    creds = resolve_credentials(["acme"], env=env)

    assert (creds.app_id, creds.installation_id, creds.pem) == (1, 2, "x")
    assert creds.token == "t"


def test_unprefixed_names_win_over_github_aliases():
    env = {
        "TOKEN": "plain",
        "GITHUB_TOKEN": "prefixed",
        "APP_ID": "5",
        "GITHUB_APP_ID": "6",
        "APP_PEM_FILE": "a\\nb",
        "GITHUB_APP_PEM_FILE": "c",
    }
    creds = resolve_credentials(["acme"], env=env)

    assert creds.token == "plain"
    assert creds.app_id == 5
    assert creds.pem == "a\nb"


def test_empty_unprefixed_token_does_not_fall_back_to_alias():
    with pytest.raises(ConfigError) as exc:
        resolve_credentials(["acme"], env={"TOKEN": "", "GITHUB_TOKEN": "prefixed"})

    assert exc.value.reason == TOKEN_REQUIREMENT
    assert "TOKEN" in str(exc.value)
