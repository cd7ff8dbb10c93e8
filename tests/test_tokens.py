import time

import jwt
import pytest

from fiesta.tokens import TokenError, create_token, verify_token

SECRET = "secret"


def test_round_trip():
    signed = create_token("user-1", SECRET)
    assert verify_token(signed, SECRET) == "user-1"


def test_round_trip_with_bytes_secret():
    signed = create_token("user-2", b"secret")
    assert verify_token(signed, b"secret") == "user-2"


def test_token_uses_hs256():
    signed = create_token("user-1", SECRET)
    assert jwt.get_unverified_header(signed)["alg"] == "HS256"


def test_token_holds_discord_claim():
    signed = create_token("user-1", SECRET)
    assert jwt.decode(signed, options={"verify_signature": False}) == {"discord": "user-1"}


def test_wrong_secret_is_rejected():
    signed = create_token("user-1", SECRET)
    with pytest.raises(TokenError):
        verify_token(signed, "token")


def test_tampered_token_is_rejected():
    signed = create_token("user-1", SECRET)
    head, body, signature = signed.split(".")
    other_body = create_token("user-2", SECRET).split(".")[1]
    with pytest.raises(TokenError):
        verify_token(f"{head}.{other_body}.{signature}", SECRET)


def test_garbage_is_rejected():
    with pytest.raises(TokenError):
        verify_token("not-a-token", SECRET)


def test_other_hmac_algorithm_is_accepted():
    signed = jwt.encode({"discord": "user-3"}, SECRET, algorithm="HS512")
    assert verify_token(signed, SECRET) == "user-3"


def test_unsigned_token_is_rejected():
    signed = jwt.encode({"discord": "user-1"}, None, algorithm="none")
    with pytest.raises(TokenError, match="unexpected signing method"):
        verify_token(signed, SECRET)


def test_missing_claim_is_rejected():
    signed = jwt.encode({"sub": "user-1"}, SECRET, algorithm="HS256")
    with pytest.raises(TokenError, match="invalid token"):
        verify_token(signed, SECRET)


def test_non_string_claim_is_rejected():
    signed = jwt.encode({"discord": 42}, SECRET, algorithm="HS256")
    with pytest.raises(TokenError, match="invalid token"):
        verify_token(signed, SECRET)


def test_expired_token_is_rejected():
    signed = jwt.encode(
        {"discord": "user-1", "exp": int(time.time()) - 60}, SECRET, algorithm="HS256"
    )
    with pytest.raises(TokenError):
        verify_token(signed, SECRET)