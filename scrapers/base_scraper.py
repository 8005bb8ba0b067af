"""
Abstract base class for single-page product scrapers.
Each scraper must implement: load_page(), extract(), save().
"""
import abc
import logging
from pathlib import Path

from shared.constants import ERROR_LOG_FILE, USER_AGENT

from .config import Settings, get_settings
from .output_writer import write_error_log


class BaseScraper(abc.ABC):
    """
    Base scraper using Playwright for browser automation.
    Subclasses implement site-specific page loading, extraction and output.

    One run owns one browser and one page. The browser is opened at the
    start of run() and closed in its finally block, whatever happens.
    """

    site_name: str = "base"

    def __init__(self, settings: Settings = None):
        self.settings = settings or get_settings()
        self.output_path = self.settings.get_output_path()
        self.headless = self.settings.headless
        self.debug = self.settings.debug
        self.browser = None
        self.page = None
        self._pw = None
        self._log = logging.getLogger(f"scrapers.{self.site_name}")

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def _init_browser(self):
        from playwright.sync_api import sync_playwright
        self._pw = sync_playwright().__enter__()
        self.browser = self._pw.chromium.launch(
            headless=self.headless,
            args=["--disable-blink-features=AutomationControlled"],
        )
        self.page = self.browser.new_page(
            user_agent=USER_AGENT,
            viewport={
                "width": self.settings.viewport_width,
                "height": self.settings.viewport_height,
            },
        )

    def _close_browser(self):
        try:
            if self.browser:
                self.browser.close()
                self._log.info("Browser closed")
        except Exception as exc:
            self._log.warning("Browser did not close cleanly: %s", exc)
        try:
            if self._pw:
                self._pw.__exit__(None, None, None)
        except Exception as exc:
            self._log.warning("Playwright driver did not stop cleanly: %s", exc)
        self._pw = self.browser = self.page = None

    # ------------------------------------------------------------------
    # Abstract interface
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def load_page(self) -> None:
        """Navigate to the target page and wait until it has rendered."""

    @abc.abstractmethod
    def extract(self):
        """Read the rendered page and return the scraped record."""

    @abc.abstractmethod
    def save(self, record) -> dict:
        """Persist the record. Returns the written paths keyed by kind."""

    # ------------------------------------------------------------------
    # Public run method
    # ------------------------------------------------------------------

    @property
    def error_log_path(self) -> Path:
        return self.output_path / ERROR_LOG_FILE

    def _clear_error_log(self):
        """Remove the error log of an earlier failed run."""
        try:
            self.error_log_path.unlink(missing_ok=True)
        except OSError as exc:
            self._log.warning("Could not remove stale %s: %s", self.error_log_path, exc)

    def run(self) -> dict:
        """
        Full scraping cycle, no retries. Returns:
        {"site": str, "status": str, "record": obj | None, "file": Path | None,
         "screenshot": Path | None, "error": str | None}
        """
        result = {
            "site": self.site_name,
            "status": "failed",
            "record": None,
            "file": None,
            "screenshot": None,
            "error": None,
        }

        try:
            self.output_path.mkdir(parents=True, exist_ok=True)
            self._init_browser()
            self.load_page()
            record = self.extract()
            written = self.save(record)
            result.update({"status": "success", "record": record, **written})
            self._clear_error_log()
        except Exception as exc:
            self._log.exception("An error occurred while scraping %s", self.site_name)
            result["error"] = str(exc) or type(exc).__name__
            try:
                write_error_log(exc, self.error_log_path)
            except OSError:
                self._log.exception("Could not write %s", self.error_log_path)
        finally:
            self._close_browser()

        return result
