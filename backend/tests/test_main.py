from fastapi.testclient import TestClient

from asset_extractor import extractor
from asset_extractor.main import app
from asset_extractor.sse_utils import parse_sse_event

client = TestClient(app)


def _serve(monkeypatch, html):
    async def fetch(url, client=None):
        return html
    monkeypatch.setattr(extractor, "fetch_html", fetch)


def test_root_returns_prompt():
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json() == {"initial_message": "Enter a URL to extract website assets"}


def test_health():
    assert client.get("/health").json() == {"status": "ok"}


def test_extract_without_url():
    resp = client.post("/extract", json={})
    assert resp.status_code == 200
    assert resp.json() == {"success": False, "error": "Please provide a valid URL"}


def test_extract_invalid_url():
    body = client.post("/extract", json={"url": "nope"}).json()
    assert body["success"] is False
    assert body["error"].startswith("Failed to extract assets from the provided URL: ")


def test_extract_success(monkeypatch, landing_page):
    _serve(monkeypatch, landing_page)
    body = client.post("/extract", json={"url": "https://example.com"}).json()

    assert body["success"] is True
    assert "error" not in body
    buttons = body["assets"]["buttons"]
    assert [b["text"] for b in buttons] == ["Get started", "Watch demo"]
    assert buttons[1]["class_name"] == "btn-outline"
    templates = body["assets"]["templates"]
    assert [t["name"] for t in templates][:2] == ["Navigation", "Hero Section"]


def test_extract_form_post(monkeypatch, landing_page):
    _serve(monkeypatch, landing_page)
    body = client.post("/extract/form", data={"url": "https://example.com"}).json()
    assert body["success"] is True
    assert len(body["assets"]["templates"]) == 4


def test_extract_form_post_without_url():
    body = client.post("/extract/form", data={}).json()
    assert body == {"success": False, "error": "Please provide a valid URL"}


def test_extract_stream(monkeypatch, landing_page):
    _serve(monkeypatch, landing_page)
    resp = client.post("/extract/stream", json={"url": "https://example.com"})

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/event-stream")
    events = [parse_sse_event(f) for f in resp.text.split("\n\n") if f.strip()]
    assert events[0]["step"] == "validating"
    assert events[-1]["type"] == "done"
    assert events[-1]["success"] is True


def _stream_done(payload):
    resp = client.post("/extract/stream", json=payload)
    events = [parse_sse_event(f) for f in resp.text.split("\n\n") if f.strip()]
    done = events[-1]
    done.pop("type")
    return done


def test_extract_and_stream_return_the_same_envelope(monkeypatch):
    _serve(monkeypatch, '<button>Plain</button><button class="btn">Styled</button>')
    payload = {"url": "https://example.com"}

    body = client.post("/extract", json=payload).json()
    assert body == _stream_done(payload)
    assert body["assets"]["buttons"][0]["class_name"] is None
    assert body["assets"]["buttons"][1]["class_name"] == "btn"


def test_failure_envelope_matches_stream():
    payload = {"url": "nope"}
    body = client.post("/extract", json=payload).json()
    assert body == _stream_done(payload)
    assert set(body) == {"success", "error"}
