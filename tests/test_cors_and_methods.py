import pytest

SCANNER_PATHS = ["/finger-login", "/log-fingerprint", "/mark-attendance"]


@pytest.mark.parametrize("path", SCANNER_PATHS)
def test_options_returns_empty_200_with_cors_headers(client, path):
    resp = client.options(path)

    assert resp.status_code == 200
    assert resp.content == b""
    assert resp.headers["access-control-allow-origin"] == "*"
    assert "content-type" in resp.headers["access-control-allow-headers"]


@pytest.mark.parametrize("path", SCANNER_PATHS)
def test_browser_preflight_gets_empty_200_for_any_origin(client, path):
    resp = client.options(
        path,
        headers={
            "Origin": "http://scanner.local",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "content-type",
        },
    )

    assert resp.status_code == 200
    assert resp.content == b""
    assert resp.headers["access-control-allow-origin"] == "*"
    assert resp.headers["access-control-allow-headers"] == (
        "authorization, x-client-info, apikey, content-type"
    )


@pytest.mark.parametrize("path", SCANNER_PATHS)
@pytest.mark.parametrize("method", ["get", "put", "delete", "patch"])
def test_non_post_methods_return_405(client, path, method):
    resp = client.request(method.upper(), path)

    assert resp.status_code == 405
    assert resp.json() == {"error": "Method not allowed"}


def test_handler_responses_carry_cors_headers(client):
    resp = client.post("/finger-login", json={"fingerprint_id": 1})

    assert resp.headers["access-control-allow-origin"] == "*"


def test_invalid_json_body_is_rejected(client):
    resp = client.post(
        "/log-fingerprint",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert resp.status_code == 400
    assert "error" in resp.json()


def test_latency_header_is_set(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert "x-latency-ms" in resp.headers
