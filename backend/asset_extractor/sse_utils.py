"""Server-Sent Events helpers for the streaming extract endpoint."""

import json

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
    "Access-Control-Allow-Origin": "*",
}


def sse_event(event_type: str, data: dict) -> str:
    """Format a Server-Sent Event string."""
    payload = {"type": event_type, **data}
    return f"data: {json.dumps(payload, ensure_ascii=False)}\n\n"


def parse_sse_event(raw: str) -> dict:
    """Inverse of sse_event for a single `data:` frame."""
    line = raw.strip()
    if not line.startswith("data:"):
        raise ValueError(f"Not an SSE data frame: {raw[:40]!r}")
    return json.loads(line[len("data:"):].strip())
