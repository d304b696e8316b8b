"""
Page fetching.

Two ways to get markup for a URL:
  - fetch_html: plain HTTP GET with a desktop browser User-Agent. Fast,
    sees only what the server sends.
  - render_html: headless Chromium via Playwright. Slower, but picks up
    buttons and sections that client-side JS injects.
"""

from urllib.parse import urlparse

import httpx
from playwright.async_api import async_playwright

from asset_extractor.config import get_settings
from asset_extractor.errors import FetchError, InvalidURLError, MissingURLError


def validate_url(url) -> str:
    """Return the stripped URL, or raise if it is missing or not http(s)."""
    if url is None or not str(url).strip():
        raise MissingURLError()
    url = str(url).strip()

    try:
        parsed = urlparse(url)
    except ValueError:
        raise InvalidURLError(f"Invalid URL: {url}")
    if parsed.scheme not in ("http", "https") or not parsed.hostname:
        raise InvalidURLError(f"Invalid URL: {url}")
    return url


def _headers() -> dict:
    return {"User-Agent": get_settings().user_agent}


async def fetch_html(url: str, client: httpx.AsyncClient | None = None) -> str:
    """GET the page and return its body as text."""
    settings = get_settings()
    owns_client = client is None
    if owns_client:
        client = httpx.AsyncClient(
            timeout=settings.fetch_timeout,
            follow_redirects=True,
        )

    try:
        print(f"  [fetch] GET {url}")
        resp = await client.get(url, headers=_headers(), follow_redirects=True)
    except httpx.HTTPError as e:
        raise FetchError(f"Failed to fetch webpage: {e}") from e
    finally:
        if owns_client:
            await client.aclose()

    if not resp.is_success:
        reason = resp.reason_phrase or str(resp.status_code)
        raise FetchError(f"Failed to fetch webpage: {reason}")

    print(f"  [fetch] {resp.status_code} {len(resp.text)} chars")
    return resp.text


async def render_html(url: str) -> str:
    """Load the page in headless Chromium and return the rendered DOM."""
    settings = get_settings()

    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=True)
        try:
            context = await browser.new_context(
                viewport={
                    "width": settings.viewport_width,
                    "height": settings.viewport_height,
                },
                user_agent=settings.user_agent,
            )
            page = await context.new_page()

            # Navigate — fall back to DOMContentLoaded if the network never idles
            try:
                await page.goto(url, wait_until="networkidle", timeout=settings.page_load_timeout)
            except Exception:
                try:
                    await page.goto(url, wait_until="domcontentloaded", timeout=settings.page_load_timeout)
                    await page.wait_for_timeout(2000)
                except Exception as e2:
                    raise FetchError(f"Failed to load {url}: {e2}") from e2

            html = await page.content()
            print(f"  [render] {url} -> {len(html)} chars")
            return html
        finally:
            await browser.close()
