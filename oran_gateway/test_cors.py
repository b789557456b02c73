"""
Tests for the CORS helpers.
Run with: pytest oran_gateway/test_cors.py -v
"""

import asyncio

from starlette.responses import StreamingResponse

from oran_gateway.cors import CORS_HEADERS, corsify, corsify_response


def test_corsify_response_empty_body():
    resp = corsify_response(None, status_code=204)
    assert resp.status_code == 204
    assert resp.body == b""
    assert "content-type" not in resp.headers
    for key, value in CORS_HEADERS.items():
        assert resp.headers[key] == value


def test_corsify_response_keeps_given_headers():
    resp = corsify_response('{"a":1}', status_code=500, headers={"content-type": "application/json"})
    assert resp.headers["content-type"] == "application/json"
    assert resp.headers["access-control-allow-headers"] == "Content-Type, Authorization"


def test_corsify_response_overrides_conflicting_cors_header():
    resp = corsify_response("x", headers={"Access-Control-Allow-Origin": "https://example.org"})
    assert resp.headers["access-control-allow-origin"] == "*"


def test_corsify_does_not_consume_stream():
    consumed = []

    async def body():
        consumed.append(True)
        yield b"chunk"

    original = StreamingResponse(body(), status_code=202, media_type="text/event-stream")
    resp = corsify(original)

    assert resp is original
    assert resp.status_code == 202
    assert consumed == []
    assert resp.headers["access-control-allow-origin"] == "*"

    async def drain():
        return [chunk async for chunk in resp.body_iterator]

    assert asyncio.run(drain()) == [b"chunk"]
