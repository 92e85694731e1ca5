from __future__ import annotations

import json
from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

import httpx

from pacrecords.core.schema import ServiceDescriptor
from pacrecords.core.services import ServiceRegistry, build_default_registry
from pacrecords.core.config import Settings
from pacrecords.infrastructure.webservice import WebServiceClient


def _make_client(handler) -> tuple[WebServiceClient, httpx.Client]:
    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    registry = build_default_registry(Settings())
    return WebServiceClient(registry, timeout=5, http_client=http_client), http_client


def test_unknown_service_makes_no_request():
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, text="unexpected")

    client, http_client = _make_client(handler)

    result = json.loads(client.get_data("GetSwimmers", "SCY"))

    assert calls == []
    assert result["status"] == -1
    assert result["error"] == "Illegal service name: 'GetSwimmers'"
    assert "content" not in result

    client.close()
    http_client.close()


def test_successful_response_counts_lines():
    body = '[{"event":"50 FR","time":"21.50"},\n{"event":"100 FR","time":"47.10"}]\n'
    captured: dict[str, str] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["url"] = str(request.url)
        captured["method"] = request.method
        return httpx.Response(200, text=body)

    client, http_client = _make_client(handler)

    result = json.loads(client.get_records("SCY"))

    assert captured["method"] == "GET"
    assert captured["url"] == "https://data.pacificmasters.org/api/pacrecords/GetRecords.php?SCY"
    assert result == {"status": 2, "error": "", "content": body}
    assert json.loads(result["content"])[1]["event"] == "100 FR"

    client.close()
    http_client.close()


def test_dev_service_targets_development_domain():
    captured: dict[str, str] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["url"] = str(request.url)
        return httpx.Response(200, text="[]")

    client, http_client = _make_client(handler)

    result = json.loads(client.get_records_dev("LCM"))

    assert captured["url"] == "https://pacmdev.org/api/pacrecords/GetRecords.php?LCM"
    assert result == {"status": 0, "error": "", "content": "[]"}

    client.close()
    http_client.close()


def test_empty_query_omits_question_mark():
    captured: dict[str, str] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["url"] = str(request.url)
        return httpx.Response(200, text="")

    client, http_client = _make_client(handler)

    result = json.loads(client.get_data("GetRecords"))

    assert captured["url"] == "https://data.pacificmasters.org/api/pacrecords/GetRecords.php"
    assert result == {"status": 0, "error": "", "content": ""}

    client.close()
    http_client.close()


def test_streamed_chunks_are_concatenated_in_order():
    chunks = [b"line one\n", b"line two\n", b"tail"]

    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=iter(chunks))

    client, http_client = _make_client(handler)

    envelope = client.invoke("GetRecords", "SCM")

    assert envelope.status == 2
    assert envelope.error == ""
    assert envelope.content == "line one\nline two\ntail"

    client.close()
    http_client.close()


def test_transport_failure_reports_reason():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    client, http_client = _make_client(handler)

    result = json.loads(client.get_records("SCY"))

    assert result["status"] == -2
    assert "Connection refused" in result["error"]
    assert result["error"].startswith("HTTP error: '599'")
    assert "GetRecords.php?SCY" in result["error"]
    assert "content" not in result

    client.close()
    http_client.close()


def test_non_success_status_discards_body():
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(404, text="<html>missing\n</html>\n")

    client, http_client = _make_client(handler)

    result = json.loads(client.get_records("SCY"))

    assert result["status"] == -3
    assert "HTTP status: '404'" in result["error"]
    assert "reason: 'Not Found'" in result["error"]
    assert "missing" not in result["content"]
    assert json.loads(result["content"]) == {"status": -3, "error": result["error"]}

    client.close()
    http_client.close()


def test_non_success_status_without_body_is_detected():
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(500)

    client, http_client = _make_client(handler)

    envelope = client.invoke("GetRecords_dev", "SCY")

    assert envelope.status == -3
    assert "callback #1" in envelope.error
    assert "HTTP status: '500'" in envelope.error

    client.close()
    http_client.close()


def test_custom_registry_is_used():
    registry = ServiceRegistry(
        [ServiceDescriptor(name="Echo", domain="echo.example.org/", path="/v1/echo")]
    )
    captured: dict[str, str] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["url"] = str(request.url)
        return httpx.Response(200, text="hello\n")

    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    with WebServiceClient(registry, timeout=5, http_client=http_client) as client:
        result = json.loads(client.get_data("Echo", "a=1&b=2"))
        missing = json.loads(client.get_records("SCY"))

    assert captured["url"] == "https://echo.example.org/v1/echo?a=1&b=2"
    assert result == {"status": 1, "error": "", "content": "hello\n"}
    assert missing["status"] == -1

    http_client.close()


def test_malformed_query_is_reported_not_raised():
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, text="unexpected")

    client, http_client = _make_client(handler)

    result = json.loads(client.get_data("GetRecords", "SCY\x00"))

    assert calls == []
    assert result["status"] == -2
    assert result["error"].startswith("HTTP error: '599', reason: '")
    assert "content" not in result

    client.close()
    http_client.close()


def test_undecodable_bytes_are_replaced_in_content():
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            content=b"caf\xe9\nok\n",
            headers={"Content-Type": "application/json"},
        )

    client, http_client = _make_client(handler)

    envelope = client.invoke("GetRecords", "SCY")

    assert envelope.status == 2
    assert envelope.content == "caf�\nok\n"

    client.close()
    http_client.close()
