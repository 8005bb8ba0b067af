"""
Goodyear tire product page scraper — Playwright

Loads one product page and reads:
  1. Product info    — H1 name + first matching price element
  2. Rim diameters   — input[name="rimDiameter"] variation buttons
  3. Tire sizes      — input[name="tireSizeCode"] variation buttons, parsed from "235/65R18"

The page-side scripts only return raw text and attributes; parsing lives in
tire_parser so it can be exercised without a browser.
"""

from shared.constants import (
    BASE_PRODUCT_ID,
    DATA_FILE,
    PRICE_SELECTORS,
    RIM_DIAMETER_INPUT,
    SCREENSHOT_FILE,
    SITE_NAME,
    TARGET_URL,
    TIRE_SIZE_INPUT,
    TITLE_SELECTOR,
)

from .base_scraper import BaseScraper
from .output_writer import save_outputs
from .tire_data import ProductInfo, RimDiameter, TireData, TireSize, build_tire_data
from .tire_parser import build_rim_diameters, build_tire_sizes, clean_name, normalize_price

# ── Page-side scripts ─────────────────────────────────────────────────────────

_PRODUCT_INFO_JS = """([priceSelectors, titleSelector]) => {
    let priceElement = null;
    for (const selector of priceSelectors) {
        priceElement = document.querySelector(selector);
        if (priceElement) break;
    }
    const titleElement = document.querySelector(titleSelector);
    return {
        name: titleElement ? titleElement.textContent : null,
        price: priceElement ? priceElement.textContent : null,
    };
}"""

_INPUT_ATTRS_JS = """(selector) =>
    Array.from(document.querySelectorAll(selector)).map(el => ({
        id: el.id || '',
        value: el.value || '',
        dataValue: el.getAttribute('data-value'),
        dataUrl: el.getAttribute('data-url'),
        valueAttr: el.getAttribute('value'),
    }))
"""


class GoodyearTireScraper(BaseScraper):
    """
    Playwright-based scraper for the Goodyear Assurance WeatherReady 2 page.

    Call run() for the whole cycle (browser → page → JSON + screenshot).
    The extract_* methods expect self.page to be loaded already.
    """

    site_name = SITE_NAME

    url = TARGET_URL
    base_product_id = BASE_PRODUCT_ID

    # ── Page loader ───────────────────────────────────────────────────────────

    def load_page(self) -> None:
        self._log.info("Navigating to %s", self.url)
        self.page.goto(
            self.url,
            wait_until="networkidle",
            timeout=self.settings.navigation_timeout_ms,
        )
        self._log.info("Page loaded, beginning data extraction...")
        self.page.wait_for_timeout(self.settings.settle_delay_ms)

        if self.debug:
            fname = self.output_path / f"debug_{self.site_name}_{self.base_product_id}.html"
            fname.write_text(self.page.content(), encoding="utf-8")
            self._log.info("Debug HTML → %s", fname)

    # ── Extractors ────────────────────────────────────────────────────────────

    def extract_product_info(self) -> ProductInfo:
        raw = self.page.evaluate(_PRODUCT_INFO_JS, [list(PRICE_SELECTORS), TITLE_SELECTOR])
        info = ProductInfo(
            name=clean_name(raw.get("name")),
            base_product_id=self.base_product_id,
            price_range=normalize_price(raw.get("price")),
        )
        self._log.info("Product info extracted: %s", info)
        return info

    def _input_attrs(self, selector: str) -> list[dict]:
        return self.page.evaluate(_INPUT_ATTRS_JS, selector) or []

    def extract_rim_diameters(self) -> dict[str, RimDiameter]:
        diameters = build_rim_diameters(self._input_attrs(RIM_DIAMETER_INPUT))
        self._log.info("Found %d rim diameters", len(diameters))
        return diameters

    def extract_tire_sizes(self) -> dict[str, TireSize]:
        sizes = build_tire_sizes(self._input_attrs(TIRE_SIZE_INPUT))
        self._log.info("Found %d tire sizes", len(sizes))
        return sizes

    def extract(self) -> TireData:
        product_info = self.extract_product_info()
        rim_diameters = self.extract_rim_diameters()
        tire_sizes = self.extract_tire_sizes()
        return build_tire_data(
            product_info=product_info,
            rim_diameters=rim_diameters,
            tire_sizes=tire_sizes,
            scraped_url=self.url,
        )

    # ── Output ────────────────────────────────────────────────────────────────

    def save(self, record: TireData) -> dict:
        json_path, screenshot_path = save_outputs(
            self.page,
            record.to_dict(),
            self.output_path / DATA_FILE,
            self.output_path / SCREENSHOT_FILE,
        )
        return {"file": json_path, "screenshot": screenshot_path}
