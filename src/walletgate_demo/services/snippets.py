"""
walletgate_demo/services/snippets.py — Integration snippets and display helpers.

``build_snippets`` renders the session-creation request for the current
check list in seven ecosystems. The checks are embedded in builder order,
so the snippet always matches the request the storefront really sent.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Sequence

from walletgate_demo.models.checks import DEFAULT_AGE, CheckDescriptor
from walletgate_demo.models.enums import CheckType, CodeLang
from walletgate_demo.services.check_builder import checks_payload

PUBLIC_SESSIONS_URL = "https://api.walletgate.app/v1/sessions"
RETURN_URL = "https://yourshop.eu/done"


def _age_value(check: CheckDescriptor):
    return check.value if check.value is not None else DEFAULT_AGE


def _node_checks(checks: Sequence[CheckDescriptor]) -> str:
    parts = []
    for check in checks:
        if check.type is CheckType.AGE_OVER:
            parts.append(f"{{ type: 'age_over', value: {_age_value(check)} }}")
        else:
            parts.append(f"{{ type: '{check.type.value}' }}")
    return ",\n    ".join(parts)


def _python_checks(checks: Sequence[CheckDescriptor]) -> str:
    parts = []
    for check in checks:
        if check.type is CheckType.AGE_OVER:
            parts.append(f'{{"type": "age_over", "value": {_age_value(check)}}}')
        else:
            parts.append(f'{{"type": "{check.type.value}"}}')
    return ", ".join(parts)


def _json_checks(checks: Sequence[CheckDescriptor]) -> str:
    """Compact JSON array, same spacing as ``JSON.stringify``."""
    return json.dumps(checks_payload(checks), separators=(",", ":"))


def build_snippets(checks: Sequence[CheckDescriptor]) -> dict[CodeLang, str]:
    node_checks = _node_checks(checks)
    py_checks = _python_checks(checks)
    json_checks = _json_checks(checks)
    java_checks = json_checks.replace('"', '\\\\"')

    return {
        CodeLang.NODE: f"""// npm install @walletgate/eudi
const WalletGate = require('@walletgate/eudi');
const client = new WalletGate('YOUR_API_KEY');

const session = await client.verify({{
  checks: [
    {node_checks}
  ],
  returnUrl: '{RETURN_URL}'
}});

console.log(session.verificationUrl);""",

        CodeLang.PYTHON: f"""# pip install walletgate
import requests

response = requests.post(
    '{PUBLIC_SESSIONS_URL}',
    headers={{'Authorization': 'Bearer YOUR_API_KEY'}},
    json={{
        'checks': [{py_checks}],
        'returnUrl': '{RETURN_URL}'
    }}
)

print(response.json())""",

        CodeLang.CURL: f"""curl -X POST {PUBLIC_SESSIONS_URL} \\
  -H "Authorization: Bearer YOUR_API_KEY" \\
  -H "Content-Type: application/json" \\
  -d '{{"checks": {json_checks}, "returnUrl": "{RETURN_URL}"}}'""",

        CodeLang.RUBY: f"""require 'net/http'
require 'json'

uri = URI('{PUBLIC_SESSIONS_URL}')
http = Net::HTTP.new(uri.host, uri.port)
http.use_ssl = true

request = Net::HTTP::Post.new(uri)
request['Authorization'] = 'Bearer YOUR_API_KEY'
request['Content-Type'] = 'application/json'
request.body = {{
  checks: [{py_checks}],
  returnUrl: '{RETURN_URL}'
}}.to_json

response = http.request(request)
puts response.body""",

        CodeLang.GO: f"""package main

import (
  "bytes"
  "encoding/json"
  "fmt"
  "net/http"
)

func main() {{
  body, _ := json.Marshal(map[string]interface{{}}{{
    "checks":    {json_checks},
    "returnUrl": "{RETURN_URL}",
  }})

  req, _ := http.NewRequest("POST",
    "{PUBLIC_SESSIONS_URL}",
    bytes.NewBuffer(body))
  req.Header.Set("Authorization", "Bearer YOUR_API_KEY")
  req.Header.Set("Content-Type", "application/json")

  resp, _ := http.DefaultClient.Do(req)
  fmt.Println(resp.Status)
}}""",

        CodeLang.JAVA: f"""import java.net.http.HttpClient;
import java.net.http.HttpRequest;
import java.net.http.HttpResponse;
import java.net.URI;

HttpClient client = HttpClient.newHttpClient();
HttpRequest request = HttpRequest.newBuilder()
    .uri(URI.create("{PUBLIC_SESSIONS_URL}"))
    .header("Authorization", "Bearer YOUR_API_KEY")
    .header("Content-Type", "application/json")
    .POST(HttpRequest.BodyPublishers.ofString(
        "{{\\"checks\\": {java_checks}, \\"returnUrl\\": \\"{RETURN_URL}\\"}}"
    ))
    .build();

HttpResponse<String> response = client.send(request,
    HttpResponse.BodyHandlers.ofString());
System.out.println(response.body());""",

        CodeLang.KOTLIN: f"""import java.net.http.HttpClient
import java.net.http.HttpRequest
import java.net.http.HttpResponse
import java.net.URI

fun main() {{
    val client = HttpClient.newHttpClient()
    val request = HttpRequest.newBuilder()
        .uri(URI.create("{PUBLIC_SESSIONS_URL}"))
        .header("Authorization", "Bearer YOUR_API_KEY")
        .header("Content-Type", "application/json")
        .POST(HttpRequest.BodyPublishers.ofString(\"\"\"
            {{"checks": {json_checks}, "returnUrl": "{RETURN_URL}"}}
        \"\"\".trimIndent()))
        .build()

    val response = client.send(request,
        HttpResponse.BodyHandlers.ofString())
    println(response.body())
}}""",
    }


# ═══════════════════════════════════════════════════════════════════════════
# DISPLAY HELPERS
# ═══════════════════════════════════════════════════════════════════════════


def format_check_name(key: str) -> str:
    """Result key → label: ``age_over_18`` → ``Age 18+``."""
    if key.startswith("age_over_"):
        return f"Age {key.removeprefix('age_over_')}+"
    if key == CheckType.RESIDENCY_EU.value:
        return "EU Residency"
    if key == CheckType.IDENTITY_VERIFIED.value:
        return "Identity Verified"
    return key


def format_time_left(expires_at: datetime | None, now: datetime | None = None) -> str:
    """``MM:SS`` until expiry; ``--:--`` without expiry, ``00:00`` once passed."""
    if expires_at is None:
        return "--:--"
    if expires_at.tzinfo is None:
        expires_at = expires_at.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    remaining_ms = int((expires_at - now).total_seconds() * 1000)
    if remaining_ms <= 0:
        return "00:00"
    minutes, rest_ms = divmod(remaining_ms, 60_000)
    return f"{minutes:02d}:{rest_ms // 1000:02d}"
