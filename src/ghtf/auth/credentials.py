"""
Credential values and the token/app authentication modes.

`Credentials` carries every field the operator may have supplied. The auth
mode is derived from it by `select_auth_mode`, which always yields exactly one
of `TokenAuth` or `AppAuth`.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Union


@dataclass(frozen=True)
class Credentials:
    owner: str
    token: str = ""
    base_url: str = ""
    app_id: int = 0
    installation_id: int = 0
    pem: str = ""

    def as_args(self) -> Dict[str, Any]:
        """Argument bag injected into generators, all six fields always set"""
        return {
            "owner": self.owner,
            "token": self.token,
            "base_url": self.base_url,
            "app_id": self.app_id,
            "installation_id": self.installation_id,
            "pem": self.pem,
        }

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> "Credentials":
        """Rebuild credentials from an injected argument bag"""
        return cls(
            owner=args.get("owner", ""),
            token=args.get("token") or "",
            base_url=args.get("base_url") or "",
            app_id=args.get("app_id") or 0,
            installation_id=args.get("installation_id") or 0,
            pem=args.get("pem") or "",
        )


@dataclass(frozen=True)
class TokenAuth:
    owner: str
    token: str
    base_url: str

    mode = "token"

    def to_config(self) -> Dict[str, Any]:
        return {
            "owner": self.owner,
            "token": self.token,
            "base_url": self.base_url,
        }


@dataclass(frozen=True)
class AppAuth:
    owner: str
    app_id: int
    installation_id: int
    pem: str

    mode = "app"

    def to_config(self) -> Dict[str, Any]:
        return {
            "owner": self.owner,
            "app_auth": [
                {
                    "id": self.app_id,
                    "installation_id": self.installation_id,
                    "pem_file": self.pem,
                }
            ],
        }


AuthMode = Union[TokenAuth, AppAuth]


def select_auth_mode(credentials: Credentials) -> AuthMode:
    """
    Pick the authentication mode for a set of credentials.

    App auth wins only when the app ID, installation ID and PEM key are all
    set. Anything else falls back to token auth, even with an empty token.
    """
    if credentials.app_id != 0 and credentials.installation_id != 0 and credentials.pem:
        return AppAuth(
            owner=credentials.owner,
            app_id=credentials.app_id,
            installation_id=credentials.installation_id,
            pem=credentials.pem,
        )
    return TokenAuth(
        owner=credentials.owner,
        token=credentials.token,
        base_url=credentials.base_url,
    )
