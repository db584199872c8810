"""
thorn_crawler.browser
=====================
Single Chromium page driven through Playwright's sync API.

The crawler only ever has one page-level operation in flight: every method
here blocks until navigation, evaluation or PDF rendering has finished.
Navigation waits for network idle (bounded by NAVIGATION_TIMEOUT_MS) and
then sleeps a fixed settle delay so the SPA can finish rendering.
"""

from __future__ import annotations

import time
from pathlib import Path

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from .config import (
    NAVIGATION_TIMEOUT_MS, NAVIGATION_WAIT_UNTIL, PAGE_LOG_PREFIX,
    PDF_OPTIONS, SESSION_COOKIE_DOMAIN, SESSION_COOKIE_NAME, VIEWPORT,
)
from .errors import ExportError, InitializationError, NavigationError
from .logging_setup import log

# Runs inside the page; removes every element matching any of the selectors
_REMOVE_CHROME_JS = """
(selectors) => {
    let removed = 0;
    for (const selector of selectors) {
        document.querySelectorAll(selector).forEach(el => { el.remove(); removed++; });
    }
    console.log(`PAGE LOG: Removed ${removed} chrome element(s)`);
    return removed;
}
"""


class BrowserSession:
    """
    Owns the Playwright driver, browser, context and page.

    Use as a context manager, or call :meth:`start` / :meth:`close`.
    """

    def __init__(
        self,
        headless: bool = True,
        session_cookie: str = "",
        cookie_name: str = SESSION_COOKIE_NAME,
        cookie_domain: str = SESSION_COOKIE_DOMAIN,
    ) -> None:
        self.headless = headless
        self.session_cookie = session_cookie
        self.cookie_name = cookie_name
        self.cookie_domain = cookie_domain

        self._playwright = None
        self._browser = None
        self._context = None
        self._page = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> "BrowserSession":
        """Launch Chromium and open the page; raises InitializationError."""
        mode = "headless" if self.headless else "headed"
        log.info("[BROWSER] Launching Chromium (%s)...", mode)
        try:
            self._playwright = sync_playwright().start()
            self._browser = self._playwright.chromium.launch(headless=self.headless)
            self._context = self._browser.new_context(viewport=VIEWPORT)
            if self.session_cookie:
                self._context.add_cookies([{
                    "name": self.cookie_name,
                    "value": self.session_cookie,
                    "domain": self.cookie_domain,
                    "path": "/",
                    "httpOnly": True,
                    "secure": True,
                }])
                log.info("[BROWSER] Session cookie set for %s", self.cookie_domain)
            else:
                log.warning("[BROWSER] No session cookie given – private pages will not load")
            self._page = self._context.new_page()
            self._page.on("console", self._on_console)
        except PlaywrightError as exc:
            self.close()
            raise InitializationError(f"Failed to initialise browser: {exc}") from exc
        return self

    def close(self) -> None:
        """Close page, context, browser and driver; errors are logged."""
        for name in ("_page", "_context", "_browser"):
            resource = getattr(self, name)
            if resource is not None:
                try:
                    resource.close()
                except PlaywrightError as exc:
                    log.debug("Error closing %s: %s", name.lstrip("_"), exc)
                setattr(self, name, None)
        if self._playwright is not None:
            try:
                self._playwright.stop()
            except PlaywrightError as exc:
                log.debug("Error stopping playwright: %s", exc)
            self._playwright = None
            log.info("[BROWSER] Browser closed")

    def __enter__(self) -> "BrowserSession":
        return self.start()

    def __exit__(self, *exc_info) -> None:
        self.close()

    @staticmethod
    def _on_console(message) -> None:
        text = message.text
        if text.startswith(PAGE_LOG_PREFIX):
            log.debug(text)

    @property
    def page(self):
        if self._page is None:
            raise InitializationError("Browser session has not been started")
        return self._page

    # ------------------------------------------------------------------
    # Page operations
    # ------------------------------------------------------------------

    def goto(self, url: str, settle: float) -> None:
        """Navigate to *url*, wait for network idle, then *settle* seconds."""
        try:
            self.page.goto(url, wait_until=NAVIGATION_WAIT_UNTIL, timeout=NAVIGATION_TIMEOUT_MS)
        except PlaywrightError as exc:
            raise NavigationError(url, str(exc)) from exc
        if settle > 0:
            time.sleep(settle)

    def html(self) -> str:
        """Current rendered DOM as HTML."""
        try:
            return self.page.content()
        except PlaywrightError as exc:
            raise NavigationError(self.page.url, str(exc)) from exc

    def title(self) -> str:
        try:
            return self.page.title()
        except PlaywrightError as exc:
            raise NavigationError(self.page.url, str(exc)) from exc

    def remove_elements(self, selectors) -> int:
        """Delete matching elements from the live DOM; returns the count."""
        try:
            return self.page.evaluate(_REMOVE_CHROME_JS, list(selectors))
        except PlaywrightError as exc:
            raise ExportError(f"Could not strip page chrome: {exc}") from exc

    def pdf(self, path: Path) -> None:
        """Print the current page to *path*."""
        try:
            self.page.pdf(path=str(path), **PDF_OPTIONS)
        except PlaywrightError as exc:
            raise ExportError(f"PDF rendering failed for {path}: {exc}") from exc
