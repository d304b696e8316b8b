"""
Extraction pipeline: URL -> markup -> buttons + templates.

extract_assets_from_html is pure and does the classification.
extract_assets / extract_assets_streaming wrap it with fetching and turn
every failure into a {"success": False, "error": ...} result.
"""

from dataclasses import dataclass, field
from typing import AsyncGenerator

from bs4 import BeautifulSoup

from asset_extractor.classifier import (
    BUTTON_SELECTOR,
    TEMPLATE_SELECTOR,
    ExtractedButton,
    ExtractedTemplate,
    extract_button,
    extract_template,
    parse_html,
)
from asset_extractor.config import get_settings
from asset_extractor.errors import MissingURLError
from asset_extractor.fetcher import fetch_html, render_html, validate_url
from asset_extractor.sse_utils import sse_event

MISSING_URL_MESSAGE = "Please provide a valid URL"
FAILURE_PREFIX = "Failed to extract assets from the provided URL: "


@dataclass
class ExtractedAssets:
    buttons: list = field(default_factory=list)
    templates: list = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "buttons": [b.to_dict() for b in self.buttons],
            "templates": [t.to_dict() for t in self.templates],
        }


def _dedupe_by_code(items: list) -> list:
    """Keep the first item for each distinct `code`."""
    seen = set()
    unique = []
    for item in items:
        if item.code in seen:
            continue
        seen.add(item.code)
        unique.append(item)
    return unique


def extract_buttons(soup: BeautifulSoup) -> list[ExtractedButton]:
    return [extract_button(el) for el in soup.select(BUTTON_SELECTOR)]


def extract_templates(soup: BeautifulSoup) -> list[ExtractedTemplate]:
    templates = []
    for el in soup.select(TEMPLATE_SELECTOR):
        template = extract_template(el)
        if template:
            templates.append(template)
    return templates


def extract_assets_from_html(
    html: str,
    max_buttons: int | None = None,
    max_templates: int | None = None,
) -> ExtractedAssets:
    """Classify a page's markup. Never raises on malformed HTML."""
    settings = get_settings()
    if max_buttons is None:
        max_buttons = settings.max_buttons
    if max_templates is None:
        max_templates = settings.max_templates

    soup = parse_html(html)

    buttons = _dedupe_by_code(extract_buttons(soup))[:max_buttons]
    templates = _dedupe_by_code(extract_templates(soup))[:max_templates]
    return ExtractedAssets(buttons=buttons, templates=templates)


def success_result(assets: ExtractedAssets) -> dict:
    return {"success": True, "assets": assets.to_dict()}


def failure_result(error: Exception | str) -> dict:
    if isinstance(error, MissingURLError):
        return {"success": False, "error": MISSING_URL_MESSAGE}
    return {"success": False, "error": FAILURE_PREFIX + str(error)}


async def _load(url: str, render: bool) -> str:
    if render:
        return await render_html(url)
    return await fetch_html(url)


def _resolve_render(render: bool | None) -> bool:
    return get_settings().render_js if render is None else render


async def extract_assets(
    url: str | None,
    render: bool | None = None,
    max_buttons: int | None = None,
    max_templates: int | None = None,
) -> dict:
    """Fetch a URL and return the success/failure result dict."""
    if not url or not url.strip():
        return failure_result(MissingURLError())

    try:
        url = validate_url(url)
        html = await _load(url, _resolve_render(render))
        assets = extract_assets_from_html(html, max_buttons, max_templates)
    except Exception as e:
        print(f"[extract] {url}: {e}")
        return failure_result(e)

    print(f"[extract] {url}: {len(assets.buttons)} buttons, {len(assets.templates)} templates")
    return success_result(assets)


async def extract_assets_streaming(
    url: str | None,
    render: bool | None = None,
) -> AsyncGenerator[str, None]:
    """Same pipeline as extract_assets, reported step by step as SSE frames."""
    if not url or not url.strip():
        result = failure_result(MissingURLError())
        yield sse_event("error", {"message": result["error"]})
        yield sse_event("done", result)
        return

    render = _resolve_render(render)

    try:
        yield sse_event("step", {"step": "validating", "message": "Validating URL..."})
        url = validate_url(url)

        how = "Rendering" if render else "Fetching"
        yield sse_event("step", {"step": "fetching", "message": f"{how} {url}..."})
        html = await _load(url, render)

        yield sse_event("step", {"step": "parsing", "message": "Classifying elements..."})
        assets = extract_assets_from_html(html)
    except Exception as e:
        print(f"[extract] {url}: {e}")
        result = failure_result(e)
        yield sse_event("error", {"message": result["error"]})
        yield sse_event("done", result)
        return

    yield sse_event("buttons", {"count": len(assets.buttons)})
    yield sse_event("templates", {"count": len(assets.templates)})
    yield sse_event("done", success_result(assets))
