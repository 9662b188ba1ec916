"""Unit tests for the headless-browser provider, with Playwright mocked out."""

from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from fairwayfinder.models.golf_course import GolfCourse
from fairwayfinder.scrapers.browser import CARD_TEXT_SCRIPT, BrowserRenderedProvider
from fairwayfinder.scrapers.errors import RenderTimeout
from fairwayfinder.scrapers.extractors import CARD_SELECTOR

BOOKING_URL = "https://pinehills.golfrev.com/"

RENDERED_CARDS = [
    {"time": "7:30 AM", "course": "Pine Hills", "players": "4 players", "price": "$45.00"},
    {"time": "8:10 AM", "course": "Pine Hills", "players": "2 Players", "price": None},
    {"time": "8:50 AM", "course": None, "players": "2 players", "price": "$45.00"},
    {"time": "9:30 AM", "course": "Pine Hills", "players": "1 players", "price": "$38"},
]


def make_playwright(page: AsyncMock) -> tuple[MagicMock, AsyncMock]:
    """Return (Stealth class mock, browser mock) wired to hand out *page*."""
    context = AsyncMock()
    context.new_page = AsyncMock(return_value=page)

    browser = AsyncMock()
    browser.new_context = AsyncMock(return_value=context)

    playwright = MagicMock()
    playwright.chromium.launch = AsyncMock(return_value=browser)

    ctx = AsyncMock()
    ctx.__aenter__ = AsyncMock(return_value=playwright)
    ctx.__aexit__ = AsyncMock(return_value=False)

    stealth_class = MagicMock()
    stealth_class.return_value.use_async.return_value = ctx
    return stealth_class, browser


def make_page(cards: list[dict] | None = None, timeout: bool = False) -> AsyncMock:
    page = AsyncMock()
    if timeout:
        page.wait_for_selector = AsyncMock(side_effect=PlaywrightTimeoutError("Timeout 20000ms exceeded"))
    page.eval_on_selector_all = AsyncMock(return_value=cards or [])
    return page


@pytest.fixture
def provider() -> BrowserRenderedProvider:
    return BrowserRenderedProvider(timeout_seconds=5, headless=True)


class TestRenderAndExtract:
    async def test_builds_tee_times_from_complete_cards(self, provider: BrowserRenderedProvider) -> None:
        page = make_page(RENDERED_CARDS)
        stealth_class, _ = make_playwright(page)

        with patch("fairwayfinder.scrapers.browser.Stealth", stealth_class), \
                patch("fairwayfinder.scrapers.browser.async_playwright"):
            tee_times = await provider.render_and_extract(BOOKING_URL)

        # Cards missing a price or course name are dropped
        assert [t.time for t in tee_times] == ["7:30 AM", "9:30 AM"]
        assert tee_times[0].green_fee == Decimal("45.00")
        assert tee_times[0].available_spots == 4

    async def test_waits_for_card_selector_with_timeout(self, provider: BrowserRenderedProvider) -> None:
        page = make_page(RENDERED_CARDS)
        stealth_class, _ = make_playwright(page)

        with patch("fairwayfinder.scrapers.browser.Stealth", stealth_class), \
                patch("fairwayfinder.scrapers.browser.async_playwright"):
            await provider.render_and_extract(BOOKING_URL)

        page.goto.assert_awaited_once()
        assert page.goto.call_args.args[0] == BOOKING_URL
        page.wait_for_selector.assert_awaited_once_with(CARD_SELECTOR, timeout=5000)

    async def test_closes_browser_after_success(self, provider: BrowserRenderedProvider) -> None:
        stealth_class, browser = make_playwright(make_page(RENDERED_CARDS))

        with patch("fairwayfinder.scrapers.browser.Stealth", stealth_class), \
                patch("fairwayfinder.scrapers.browser.async_playwright"):
            await provider.render_and_extract(BOOKING_URL)

        browser.close.assert_awaited_once()

    async def test_selector_timeout_raises_render_timeout(self, provider: BrowserRenderedProvider) -> None:
        stealth_class, browser = make_playwright(make_page(timeout=True))

        with patch("fairwayfinder.scrapers.browser.Stealth", stealth_class), \
                patch("fairwayfinder.scrapers.browser.async_playwright"):
            with pytest.raises(RenderTimeout) as exc_info:
                await provider.render_and_extract(BOOKING_URL)

        assert exc_info.value.url == BOOKING_URL
        browser.close.assert_awaited_once()

    async def test_navigation_timeout_raises_render_timeout(self, provider: BrowserRenderedProvider) -> None:
        page = make_page()
        page.goto = AsyncMock(side_effect=PlaywrightTimeoutError("Timeout 5000ms exceeded"))
        stealth_class, browser = make_playwright(page)

        with patch("fairwayfinder.scrapers.browser.Stealth", stealth_class), \
                patch("fairwayfinder.scrapers.browser.async_playwright"):
            with pytest.raises(RenderTimeout) as exc_info:
                await provider.render_and_extract(BOOKING_URL)

        assert exc_info.value.url == BOOKING_URL
        page.wait_for_selector.assert_not_awaited()
        browser.close.assert_awaited_once()

    async def test_closes_browser_when_script_fails(self, provider: BrowserRenderedProvider) -> None:
        page = make_page()
        page.eval_on_selector_all = AsyncMock(side_effect=RuntimeError("Execution context was destroyed"))
        stealth_class, browser = make_playwright(page)

        with patch("fairwayfinder.scrapers.browser.Stealth", stealth_class), \
                patch("fairwayfinder.scrapers.browser.async_playwright"):
            with pytest.raises(RuntimeError):
                await provider.render_and_extract(BOOKING_URL)

        browser.close.assert_awaited_once()


class TestBrowserFetch:
    async def test_fetch_renders_booking_page(self, provider: BrowserRenderedProvider) -> None:
        course = GolfCourse(
            id=3,
            name="Pine Hills",
            booking_software="golfrev-rendered",
            fetch_url="https://pinehills.golfrev.com/teetimes?date={DATE}",
            booking_url=BOOKING_URL,
        )

        with patch.object(provider, "render_and_extract", AsyncMock(return_value=[])) as render:
            tee_times = await provider.fetch(course, date(2025, 5, 18))

        assert tee_times == []
        render.assert_awaited_once_with(BOOKING_URL)


class TestBrowserSettings:
    def test_explicit_zero_timeout_is_kept(self) -> None:
        # Playwright treats 0 as "no timeout"
        assert BrowserRenderedProvider(timeout_seconds=0).timeout_seconds == 0

    def test_card_script_skips_title_and_subtitle_lines(self) -> None:
        assert "!header.has(l)" in CARD_TEXT_SCRIPT
