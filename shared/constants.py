"""
Shared constants for the Goodyear tire scraper.
Target page, DOM selectors, sentinels and output file names.
"""

# ---------------------------------------------------------------------------
# Target page
# ---------------------------------------------------------------------------
SITE_NAME       = "goodyear"
TARGET_URL      = "https://www.goodyear.com/en_US/tires/assurance-weatherready-2/24987.html"
BASE_PRODUCT_ID = "24987"  # catalog id at the end of TARGET_URL

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/122.0.0.0 Safari/537.36"
)

# ---------------------------------------------------------------------------
# Selectors
# Price markup differs between page variants; order is priority.
# ---------------------------------------------------------------------------
PRICE_SELECTORS: tuple[str, ...] = (
    '[data-testid="pds-pricing"]',
    ".product-price",
    ".price-range",
    '[data-qa="product-price"]',
    ".product-sales-price",
    ".price",
)

TITLE_SELECTOR     = "h1"
VARIANT_CONTAINER  = "div.radio-button-variation.mr-8.mt-8.position-relative"
RIM_DIAMETER_INPUT = f'{VARIANT_CONTAINER} input[name="rimDiameter"]'
TIRE_SIZE_INPUT    = f'{VARIANT_CONTAINER} input[name="tireSizeCode"]'

# ---------------------------------------------------------------------------
# Sentinels
# ---------------------------------------------------------------------------
PRICE_NOT_FOUND = "Price not found"
NAME_NOT_FOUND  = "Product name not found"

# ---------------------------------------------------------------------------
# Output files (overwritten on every run)
# ---------------------------------------------------------------------------
DATA_FILE       = "tire_data.json"
SCREENSHOT_FILE = "tire_page.png"
ERROR_LOG_FILE  = "scraping_error.log"
