# tests/masking/test_masker_v1.py
"""Test sensitive-property masking of valid JSON."""
from __future__ import annotations

import json

import pytest

from jsonscrub.masking import JsonMasker, build_masker, mask_sensitive_data

pytestmark = pytest.mark.masking

MASK = "***MASKED***"


def test_masks_password():
    result = mask_sensitive_data('{"username":"john","password":"secret123"}')

    assert json.loads(result) == {"username": "john", "password": MASK}
    assert "secret123" not in result


def test_masks_token():
    result = mask_sensitive_data('{"userId":123,"token":"abc123xyz"}')

    assert json.loads(result) == {"userId": 123, "token": MASK}
    assert "abc123xyz" not in result


@pytest.mark.parametrize(
    "key,value",
    [
        ("ssn", "123-45-6789"),
        ("card", "4111111111111111"),
        ("secret", "my-secret-key"),
        ("pwd", "hunter2"),
        ("apikey", "k-1"),
        ("api_key", "k-2"),
        ("creditcard", "5500000000000004"),
    ],
)
def test_masks_each_default_key(key, value):
    result = mask_sensitive_data(json.dumps({"name": "John", key: value}))

    assert json.loads(result) == {"name": "John", key: MASK}
    assert value not in result


def test_similar_key_names_are_not_masked():
    result = mask_sensitive_data('{"cardholder":"John Doe","card":"4111111111111111"}')

    assert json.loads(result) == {"cardholder": "John Doe", "card": MASK}


def test_custom_mask_pattern():
    result = mask_sensitive_data('{"password":"secret123"}', "[REDACTED]")

    assert json.loads(result) == {"password": "[REDACTED]"}
    assert MASK not in result


def test_custom_sensitive_keys_replace_defaults():
    text = '{"username":"john","email":"john@example.com","password":"secret123"}'
    result = mask_sensitive_data(text, MASK, ["email"])

    assert json.loads(result) == {"username": "john", "email": MASK, "password": "secret123"}


def test_custom_sensitive_keys_as_csv_string():
    result = mask_sensitive_data('{"email":"a@b.c","phone":"555"}', sensitive_keys="email, phone")

    assert json.loads(result) == {"email": MASK, "phone": MASK}


def test_empty_sensitive_keys_masks_nothing():
    text = '{"password":"secret123"}'

    assert mask_sensitive_data(text, sensitive_keys=[]) == text


def test_nested_objects():
    result = mask_sensitive_data('{"user":{"name":"John","password":"secret123"}}')

    assert json.loads(result) == {"user": {"name": "John", "password": MASK}}


def test_arrays_keep_length_and_order():
    text = '[{"id":1,"password":"pass1"},{"id":2,"password":"pass2"},"plain",3]'
    result = json.loads(mask_sensitive_data(text))

    assert result == [{"id": 1, "password": MASK}, {"id": 2, "password": MASK}, "plain", 3]


def test_complex_nested_structure():
    text = (
        '{"user":{"profile":{"name":"John","password":"pass123"},"token":"token123"},'
        '"apiKey":"key123","items":[{"secret":"s1","ok":[{"pwd":"p2"}]}]}'
    )
    result = mask_sensitive_data(text)

    assert json.loads(result) == {
        "user": {"profile": {"name": "John", "password": MASK}, "token": MASK},
        "apiKey": MASK,
        "items": [{"secret": MASK, "ok": [{"pwd": MASK}]}],
    }
    for leaked in ("pass123", "token123", "key123", "s1", "p2"):
        assert leaked not in result


def test_key_casing_preserved():
    result = mask_sensitive_data('{"PASSWORD":"secret123","ApiKey":"k"}')

    assert json.loads(result) == {"PASSWORD": MASK, "ApiKey": MASK}
    assert '"password"' not in result


@pytest.mark.parametrize("value", [12345, 1.5, True, None, {"inner": "x"}, ["a", "b"]])
def test_any_value_type_becomes_mask_string(value):
    result = json.loads(mask_sensitive_data(json.dumps({"token": value, "keep": 1})))

    assert result == {"token": MASK, "keep": 1}


def test_non_sensitive_properties_unchanged():
    text = '{"username":"john","age":30,"city":"New York","active":true,"score":null}'

    assert json.loads(mask_sensitive_data(text)) == json.loads(text)


def test_output_is_compact_and_keeps_non_ascii():
    text = """{
  "name": "Zoë",
  "password": "geheim"
}"""

    assert mask_sensitive_data(text) == '{"name":"Zoë","password":"***MASKED***"}'


@pytest.mark.parametrize("text", [None, "", "   "])
def test_blank_input_returned_unchanged(text):
    assert mask_sensitive_data(text) == text
    assert (mask_sensitive_data(text) is None) == (text is None)


@pytest.mark.parametrize(
    "text",
    [
        '{"username":"john","password":"secret123"}',
        '{"connectionString":"Password=secret123;Server=localhost","note":"Password=x"}',
        '[{"a":{"TOKEN":[1,2]}},{"b":"c"}]',
    ],
)
def test_idempotent(text):
    once = mask_sensitive_data(text)

    assert mask_sensitive_data(once) == once


def test_mask_value_does_not_mutate_input():
    data = {"user": {"password": "x"}, "list": [{"token": "y"}]}
    masker = JsonMasker()

    masked = masker.mask_value(data)

    assert masked == {"user": {"password": MASK}, "list": [{"token": MASK}]}
    assert data == {"user": {"password": "x"}, "list": [{"token": "y"}]}


def test_mask_json_with_count():
    masker = build_masker()
    text = '{"password":"a","nested":{"token":"b"},"conn":"Password=c;Server=d","n":1}'

    result, count = masker.mask_json_with_count(text)

    assert count == 3
    assert json.loads(result)["conn"] == "Password=***MASKED***;Server=d"


def test_mask_json_with_count_passthrough():
    masker = build_masker()

    assert masker.mask_json_with_count(None) == (None, 0)
    assert masker.mask_json_with_count('{"a":1}') == ('{"a":1}', 0)


def test_is_sensitive_is_case_insensitive():
    masker = JsonMasker(sensitive_keys=["Email"])

    assert masker.is_sensitive("EMAIL")
    assert masker.is_sensitive("email")
    assert not masker.is_sensitive("password")
    assert masker.sensitive_keys == frozenset({"email"})


def test_defaults_from_settings(monkeypatch):
    monkeypatch.setenv("JSONSCRUB_MASK_PATTERN", "<hidden>")
    monkeypatch.setenv("JSONSCRUB_SENSITIVE_KEYS", "email,phone")

    result = mask_sensitive_data('{"email":"a@b.c","password":"p"}')

    assert json.loads(result) == {"email": "<hidden>", "password": "p"}


def test_explicit_arguments_override_settings(monkeypatch):
    monkeypatch.setenv("JSONSCRUB_MASK_PATTERN", "<hidden>")

    result = mask_sensitive_data('{"password":"p"}', "[X]")

    assert json.loads(result) == {"password": "[X]"}


@pytest.mark.parametrize(
    "name,value",
    [("JSONSCRUB_INDENT", "0"), ("JSONSCRUB_FALLBACK_LOG_LEVEL", "LOUD")],
)
def test_invalid_settings_fall_back_to_defaults(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    assert mask_sensitive_data('{"password":"x"}') == '{"password":"***MASKED***"}'
    assert mask_sensitive_data('{"password":"x" broken') == '{"password":"***MASKED***" broken'


def test_password_text_inside_token_is_not_a_connection_string():
    text = '{"token":"eyJrealtokenbodypassword=1","secret":"hunter2;password=z"}'

    result = mask_sensitive_data(text)

    assert json.loads(result) == {"token": MASK, "secret": MASK}
    assert "hunter2" not in result
    assert "eyJrealtokenbody" not in result


def test_password_text_inside_non_sensitive_value_is_kept():
    result = mask_sensitive_data('{"note":"mypassword=1;x"}')

    assert json.loads(result) == {"note": "mypassword=1;x"}
