"""Signed tokens carrying a Discord key."""

from __future__ import annotations

import jwt

_CLAIM = "discord"
_HMAC_ALGORITHMS = ["HS256", "HS384", "HS512"]


class TokenError(Exception):
    """Raised when a token cannot be signed or is not valid."""


def create_token(discord_key: str, secret: str | bytes) -> str:
    """Sign a token holding ``discord_key`` with HS256."""
    try:
        return jwt.encode({_CLAIM: discord_key}, secret, algorithm="HS256")
    except (jwt.PyJWTError, TypeError, ValueError) as exc:
        raise TokenError(f"failed to sign JWT: {exc}") from exc


def verify_token(signed: str, secret: str | bytes) -> str:
    """Check an HMAC-signed token and return the Discord key it holds."""
    try:
        claims = jwt.decode(signed, secret, algorithms=_HMAC_ALGORITHMS)
    except jwt.InvalidAlgorithmError as exc:
        header_alg = _unverified_alg(signed)
        raise TokenError(f"unexpected signing method: {header_alg}") from exc
    except jwt.PyJWTError as exc:
        raise TokenError(str(exc)) from exc

    key = claims.get(_CLAIM)
    if not isinstance(key, str):
        raise TokenError("invalid token")
    return key


def _unverified_alg(signed: str) -> object:
    try:
        return jwt.get_unverified_header(signed).get("alg")
    except jwt.PyJWTError:
        return None