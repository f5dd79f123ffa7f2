"""Tests for integration snippets and display helpers."""

from datetime import datetime, timedelta, timezone

from walletgate_demo.models.checks import CheckDescriptor
from walletgate_demo.models.enums import CheckType, CodeLang
from walletgate_demo.services.snippets import (
    build_snippets,
    format_check_name,
    format_time_left,
)

CHECKS = [
    CheckDescriptor(type=CheckType.AGE_OVER, value=18),
    CheckDescriptor(type=CheckType.RESIDENCY_EU),
]


def test_every_tab_has_a_snippet():
    snippets = build_snippets(CHECKS)
    assert set(snippets) == set(CodeLang)
    assert list(snippets) == list(CodeLang)


def test_node_snippet_lists_checks_in_order():
    node = build_snippets(CHECKS)[CodeLang.NODE]
    assert "{ type: 'age_over', value: 18 },\n    { type: 'residency_eu' }" in node
    assert "require('@walletgate/eudi')" in node


def test_python_snippet():
    python = build_snippets(CHECKS)[CodeLang.PYTHON]
    assert "'checks': [{\"type\": \"age_over\", \"value\": 18}, {\"type\": \"residency_eu\"}]," in python
    assert "headers={'Authorization': 'Bearer YOUR_API_KEY'}," in python


def test_curl_snippet_embeds_compact_json():
    curl = build_snippets(CHECKS)[CodeLang.CURL]
    assert '"checks": [{"type":"age_over","value":18},{"type":"residency_eu"}]' in curl
    assert curl.startswith("curl -X POST https://api.walletgate.app/v1/sessions \\\n")


def test_java_snippet_escapes_quotes():
    java = build_snippets(CHECKS)[CodeLang.JAVA]
    assert '[{\\\\"type\\\\":\\\\"age_over\\\\"' in java


def test_kotlin_snippet_uses_raw_string():
    kotlin = build_snippets(CHECKS)[CodeLang.KOTLIN]
    assert '.ofString("""' in kotlin
    assert '""".trimIndent()' in kotlin


def test_empty_check_list():
    snippets = build_snippets([])
    assert '"checks": []' in snippets[CodeLang.CURL]


def test_format_check_name():
    assert format_check_name("age_over_18") == "Age 18+"
    assert format_check_name("residency_eu") == "EU Residency"
    assert format_check_name("identity_verified") == "Identity Verified"
    assert format_check_name("something_else") == "something_else"


def test_format_time_left():
    now = datetime(2026, 10, 19, 10, 0, tzinfo=timezone.utc)
    assert format_time_left(None, now) == "--:--"
    assert format_time_left(now - timedelta(seconds=1), now) == "00:00"
    assert format_time_left(now + timedelta(minutes=14, seconds=59, milliseconds=900), now) == "14:59"


def test_format_time_left_naive_expiry_is_utc():
    now = datetime(2026, 10, 19, 10, 0, tzinfo=timezone.utc)
    assert format_time_left(datetime(2026, 10, 19, 10, 1), now) == "01:00"
