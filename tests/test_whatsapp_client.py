import json

import httpx

from services.whatsapp_client import WhatsAppClient

URL = "http://wa.test/send-message"


def _client(handler):
    return WhatsAppClient(url=URL, timeout=1.0, transport=httpx.MockTransport(handler))


def test_posts_number_and_message_once():
    seen = []

    def handler(request: httpx.Request):
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    assert _client(handler).try_send("+919800000001", "hello") is True
    assert len(seen) == 1
    assert seen[0].method == "POST"
    assert str(seen[0].url) == URL
    assert json.loads(seen[0].content) == {"number": "+919800000001", "message": "hello"}


def test_non_2xx_returns_false():
    def handler(request):
        return httpx.Response(503, text="gateway down")

    assert _client(handler).try_send("+91", "hi") is False


def test_transport_error_returns_false():
    calls = []

    def handler(request):
        calls.append(request)
        raise httpx.ConnectError("refused", request=request)

    assert _client(handler).try_send("+91", "hi") is False
    assert len(calls) == 1


def test_unexpected_error_returns_false():
    def handler(request):
        raise RuntimeError("bad transport")

    assert _client(handler).try_send("+91", "hi") is False


def test_defaults_come_from_settings():
    from config.settings import settings

    client = WhatsAppClient()
    assert client.url == settings.WHATSAPP_SERVICE_URL
    assert client.timeout == settings.WHATSAPP_TIMEOUT
