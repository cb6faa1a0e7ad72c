"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

_TRUTHY: frozenset[str] = frozenset({"1", "true", "yes", "on"})

ENV_PREFIX = "BISCUIT_"


def _env_flag(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(debug=True, secret_key="s3cr3t")
    """

    debug: bool = False

    # Security
    secret_key: str = ""

    # Sessions
    session_cookie_name: str = "session"
    session_secure: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppConfig:
        """Build a config from ``BISCUIT_*`` environment variables.

        Recognised variables::

            BISCUIT_DEBUG           truthy flag (1, true, yes, on)
            BISCUIT_SECRET_KEY      session signing secret
            BISCUIT_SESSION_COOKIE  session cookie name
            BISCUIT_SESSION_SECURE  truthy flag; adds ``Secure`` to the cookie

        Unset variables fall back to the dataclass defaults.
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            debug=_env_flag(env.get(f"{ENV_PREFIX}DEBUG"), defaults.debug),
            secret_key=env.get(f"{ENV_PREFIX}SECRET_KEY", defaults.secret_key),
            session_cookie_name=env.get(
                f"{ENV_PREFIX}SESSION_COOKIE", defaults.session_cookie_name
            ),
            session_secure=_env_flag(
                env.get(f"{ENV_PREFIX}SESSION_SECURE"), defaults.session_secure
            ),
        )
