import pytest

from asset_extractor.config import get_settings

LOREM = "Lorem ipsum dolor sit amet. "

LANDING_PAGE = f"""<html><head><title>Acme</title></head><body>
<header><nav><a href="/">Home</a><a href="/docs">Docs</a><a href="/blog">Blog</a></nav><p>Tagline</p></header>
<section class="hero"><h1>Ship faster</h1><p>{LOREM * 8}</p><button class="btn btn-primary">Get started</button><a class="btn-outline" href="/demo">Watch demo</a></section>
<div class="features"><p>{LOREM * 6}</p><div class="card"><h3>Fast</h3><p>{LOREM * 3}</p></div><div class="card"><h3>Fast</h3><p>{LOREM * 3}</p></div><div class="card"><h3>Secure</h3><p>{LOREM * 3}</p></div></div>
<footer><p>Copyright 2024 Acme</p><button class="btn btn-primary">Get started</button></footer>
</body></html>"""


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def landing_page():
    return LANDING_PAGE
