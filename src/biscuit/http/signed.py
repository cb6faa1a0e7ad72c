"""Signed view over a ``CookieJar``.

Cookies written through the view carry an HMAC tag; cookies read through
it are verified first and come back with the tag stripped. A cookie whose
tag does not verify reads as absent, never as an error.

Signing uses ``itsdangerous.Signer`` with the cookie name as salt, so the
tag covers the name, the value, and the key: renaming a signed cookie
invalidates it just like editing its value. Tags are compared in constant
time by ``itsdangerous``.

Key rotation: pass a sequence of secrets. The last one signs, all of them
verify, so cookies issued under a retired key stay readable until the key
is dropped from the list.
"""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Sequence
from dataclasses import replace
from typing import TYPE_CHECKING, TypeAlias

from itsdangerous import BadSignature, Signer

from biscuit.errors import ConfigurationError
from biscuit.http.cookies import Cookie

if TYPE_CHECKING:
    from biscuit.http.jar import CookieJar

logger = logging.getLogger("biscuit.sessions")

SecretKey: TypeAlias = str | bytes | Sequence[str | bytes]


def normalize_keys(secret_key: SecretKey) -> tuple[str | bytes, ...]:
    """Return *secret_key* as a non-empty tuple of keys, oldest first."""
    if isinstance(secret_key, (str, bytes)):
        keys: tuple[str | bytes, ...] = (secret_key,)
    else:
        keys = tuple(secret_key)
    if not keys or not all(keys):
        msg = "Signing secret keys must not be empty."
        raise ConfigurationError(msg)
    return keys


class SignedJar:
    """A keyed lens over a ``CookieJar``.

    Not a separate store: reads and writes go straight through to the
    underlying jar, so signed cookies show up in ``jar.delta()``.
    """

    __slots__ = ("_jar", "_keys")

    def __init__(self, jar: CookieJar, secret_key: SecretKey) -> None:
        self._jar = jar
        self._keys = normalize_keys(secret_key)

    def _signer(self, name: str) -> Signer:
        return Signer(
            self._keys,
            salt=name,
            key_derivation="hmac",
            digest_method=hashlib.sha256,
        )

    def get(self, name: str) -> Cookie | None:
        """Return the verified cookie *name*, or ``None``.

        ``None`` covers a missing cookie, a bad or missing tag, a tag made
        with another key or for another cookie name, and a verified payload
        that is not UTF-8.
        """
        cookie = self._jar.get(name)
        if cookie is None:
            return None
        try:
            value = self._signer(name).unsign(cookie.value).decode("utf-8")
        except BadSignature:
            logger.debug("Rejected signed cookie %r: bad signature", name)
            return None
        except UnicodeDecodeError:
            logger.debug("Rejected signed cookie %r: payload is not UTF-8", name)
            return None
        return replace(cookie, value=value)

    def add(self, cookie: Cookie) -> None:
        """Sign *cookie*'s value and store it in the underlying jar."""
        tagged = self._signer(cookie.name).sign(cookie.value).decode("utf-8")
        self._jar.add(replace(cookie, value=tagged))

    def remove(self, name: str) -> None:
        self._jar.remove(name)
