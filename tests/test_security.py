"""Tests for the signed session cookie value."""

from filehub.core.security import read_user_id, sign_user_id


def test_signed_value_reads_back():
    token = sign_user_id(42, "key")

    assert read_user_id(token, "key") == 42


def test_plain_id_is_rejected():
    assert read_user_id("42", "key") is None


def test_wrong_key_is_rejected():
    assert read_user_id(sign_user_id(42, "key"), "other") is None


def test_swapped_payload_is_rejected():
    _, _, signature = sign_user_id(42, "key").partition(".")
    payload, _, _ = sign_user_id(7, "key").partition(".")

    assert read_user_id(f"{payload}.{signature}", "key") is None


def test_non_integer_payload_is_rejected():
    assert read_user_id(sign_user_id("alice", "key"), "key") is None
