"""Shared fixtures for the tire scraper tests.

Provides:
- FakePage / FakeBrowser: in-memory stand-ins for the Playwright page and browser
- settings: Settings pointed at a temp output dir with no settle delay
- make_scraper: GoodyearTireScraper wired to a FakePage instead of Chromium
- input bundle factories matching what the page-side script returns
"""

from pathlib import Path

import pytest

from scrapers.config import Settings
from scrapers.goodyear_scraper import GoodyearTireScraper


# ---------------------------------------------------------------------------
# Input bundle factories
# ---------------------------------------------------------------------------

def make_rim_input(diameter, data_value=None, data_url=None, value_attr=None):
    return {
        "id": f"rim-{diameter}",
        "value": diameter,
        "dataValue": data_value if data_value is not None else f'{diameter}"',
        "dataUrl": data_url if data_url is not None else f"/en_US/tires/variation?rimDiameter={diameter}",
        "valueAttr": value_attr if value_attr is not None else diameter,
    }


def make_size_input(code, pid="100000", data_url=None, value_attr=None):
    if value_attr is None:
        value_attr = f"https://www.goodyear.com/on/demandware.store/Product-Variation?pid={pid}"
    return {
        "id": code,
        "value": value_attr,
        "dataValue": None,
        "dataUrl": data_url if data_url is not None else f"/en_US/tires/variation?size={code}",
        "valueAttr": value_attr,
    }


# ---------------------------------------------------------------------------
# In-memory fake Playwright
# ---------------------------------------------------------------------------

class FakePage:
    """Mimics the parts of playwright.sync_api.Page the scraper touches."""

    def __init__(self, product=None, rims=None, sizes=None, html="<html></html>",
                 goto_error=None, evaluate_error=None, screenshot_error=None):
        self.product = product if product is not None else {
            "name": "Assurance WeatherReady 2",
            "price": "$129.99 ea",
        }
        self.rims = rims or []
        self.sizes = sizes or []
        self.html = html
        self.goto_error = goto_error
        self.evaluate_error = evaluate_error
        self.screenshot_error = screenshot_error
        self.calls = []

    def goto(self, url, wait_until=None, timeout=None):
        self.calls.append(("goto", url, wait_until, timeout))
        if self.goto_error:
            raise self.goto_error

    def wait_for_timeout(self, timeout):
        self.calls.append(("wait_for_timeout", timeout))

    def content(self):
        return self.html

    def evaluate(self, expression, arg=None):
        self.calls.append(("evaluate", arg))
        if self.evaluate_error:
            raise self.evaluate_error
        if isinstance(arg, list):
            return dict(self.product)
        if 'name="rimDiameter"' in arg:
            return [dict(b) for b in self.rims]
        if 'name="tireSizeCode"' in arg:
            return [dict(b) for b in self.sizes]
        return []

    def screenshot(self, path=None, full_page=False):
        self.calls.append(("screenshot", path, full_page))
        if self.screenshot_error:
            raise self.screenshot_error
        Path(path).write_bytes(b"\x89PNG\r\n\x1a\nfake")
        return b""


class FakeBrowser:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def settings(tmp_path):
    return Settings(_env_file=None, output_dir=str(tmp_path), settle_delay_ms=0)


@pytest.fixture
def make_scraper(settings):
    """Build a scraper whose _init_browser hands out the given FakePage."""

    def _make(page, scraper_settings=None):
        scraper = GoodyearTireScraper(settings=scraper_settings or settings)
        browser = FakeBrowser()

        def _init_browser():
            scraper.browser = browser
            scraper.page = page

        scraper._init_browser = _init_browser
        scraper.fake_browser = browser
        return scraper

    return _make


@pytest.fixture
def two_rims_three_sizes_page():
    return FakePage(
        rims=[make_rim_input("17"), make_rim_input("18")],
        sizes=[
            make_size_input("215/60R17", pid="111111"),
            make_size_input("225/55R17", pid="222222"),
            make_size_input("bad-code", pid="333333"),
        ],
    )
