"""Headless-browser provider for tee sheets that are filled in by client-side script."""

import logging
from datetime import date

from playwright.async_api import Page, async_playwright
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright_stealth import Stealth

from fairwayfinder.config import settings
from fairwayfinder.models.golf_course import GolfCourse
from fairwayfinder.scrapers.base import BaseTeeTimeProvider
from fairwayfinder.scrapers.errors import RenderTimeout
from fairwayfinder.scrapers.extractors import (
    CARD_SELECTOR,
    CARD_SUBTITLE_SELECTOR,
    CARD_TITLE_SELECTOR,
    PLAYERS_MARKER,
    build_card_tee_time,
)
from fairwayfinder.scrapers.models import TeeTime

logger = logging.getLogger(__name__)

# Runs in the page: returns the four raw strings of each card
CARD_TEXT_SCRIPT = """
(cards, sel) => cards.map((card) => {
  const text = (s) => {
    const el = card.querySelector(s);
    return el ? el.innerText : null;
  };
  const split = (t) => t.split("\\n").map((l) => l.trim()).filter(Boolean);
  const time = text(sel.title);
  const course = text(sel.subtitle);
  const header = new Set([time, course].filter(Boolean).flatMap(split));
  const lines = split(card.innerText).filter((l) => !header.has(l));
  return {
    time: time,
    course: course,
    players: lines.find((l) => l.toLowerCase().includes(sel.marker)) || null,
    price: lines.find((l) => /\\$\\s*\\d/.test(l)) || null,
  };
})
"""


class BrowserRenderedProvider(BaseTeeTimeProvider):
    """
    Provider that renders the booking page in headless Chromium.

    Used for GolfRev pages whose availability cards are injected after load,
    so a plain GET returns an empty shell. Each call launches its own browser
    and context; the browser is closed on every exit path.
    """

    name = "GolfRev (rendered)"

    def __init__(self, timeout_seconds: float | None = None, headless: bool | None = None) -> None:
        self.timeout_seconds = (
            settings.render_timeout_seconds if timeout_seconds is None else timeout_seconds
        )
        self.headless = settings.browser_headless if headless is None else headless

    async def fetch(self, course: GolfCourse, today: date) -> list[TeeTime]:
        # The rendered page always shows the current day's sheet
        tee_times = await self.render_and_extract(course.booking_url)
        logger.info(f"{self.name}: Found {len(tee_times)} tee times for {course.name}")
        return tee_times

    async def render_and_extract(self, booking_url: str) -> list[TeeTime]:
        """
        Render the booking page and read tee times out of the live DOM.

        Raises:
            RenderTimeout: if the page or its first card does not load within the timeout
        """
        stealth = Stealth()

        async with stealth.use_async(async_playwright()) as p:
            browser = await p.chromium.launch(headless=self.headless)
            try:
                context = await browser.new_context(
                    user_agent=settings.user_agent,
                    viewport={"width": 1920, "height": 1080},
                    locale="en-US",
                )
                page = await context.new_page()
                raw_cards = await self._render_cards(page, booking_url)
            finally:
                await browser.close()

        tee_times: list[TeeTime] = []
        for raw in raw_cards:
            tee_time = build_card_tee_time(
                raw.get("time"), raw.get("course"), raw.get("players"), raw.get("price")
            )
            if tee_time:
                tee_times.append(tee_time)

        logger.debug(f"{self.name}: kept {len(tee_times)} of {len(raw_cards)} rendered cards")
        return tee_times

    async def _render_cards(self, page: Page, booking_url: str) -> list[dict]:
        timeout_ms = self.timeout_seconds * 1000

        try:
            await page.goto(booking_url, wait_until="domcontentloaded", timeout=timeout_ms)
            await page.wait_for_selector(CARD_SELECTOR, timeout=timeout_ms)
        except PlaywrightTimeoutError as e:
            raise RenderTimeout(booking_url, self.timeout_seconds) from e

        return await page.eval_on_selector_all(
            CARD_SELECTOR,
            CARD_TEXT_SCRIPT,
            {
                "title": CARD_TITLE_SELECTOR,
                "subtitle": CARD_SUBTITLE_SELECTOR,
                "marker": PLAYERS_MARKER,
            },
        )
