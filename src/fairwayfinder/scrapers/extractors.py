"""Turn raw provider responses into normalized tee-time records.

A record that is missing a required field, or whose numbers do not parse, is
dropped and the rest of the batch continues.
"""

import copy
import logging
import re
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from bs4 import BeautifulSoup, Tag

from fairwayfinder.scrapers.models import TeeTime
from fairwayfinder.utils.text import clean_text

logger = logging.getLogger(__name__)

# ForeUp JSON
FOREUP_REQUIRED_FIELDS = ("time", "course_name", "available_spots", "green_fee")
FOREUP_TIME_FORMAT = "%Y-%m-%d %H:%M"

# GolfRev card markup
CARD_SELECTOR = ".v-card"
CARD_TITLE_SELECTOR = ".v-card-title"
CARD_SUBTITLE_SELECTOR = ".v-card-subtitle"
PLAYERS_MARKER = "players"

SPOTS_RE = re.compile(r"\d+")
PRICE_RE = re.compile(r"\$\s*(\d{1,3}(?:,\d{3})+|\d+)(\.\d+)?")

CENTS = Decimal("0.01")


def format_display_time(value: datetime) -> str:
    """Render a datetime as a 12-hour display string, e.g. "7:30 AM"."""
    return value.strftime("%I:%M %p").lstrip("0")


# ---------------------------------------------------------------------------
# ForeUp (JSON)
# ---------------------------------------------------------------------------


def extract_foreup_json(payload: Any) -> list[TeeTime]:
    """
    Extract tee times from a decoded ForeUp response body.

    ForeUp answers with a JSON array of slot objects. It answers with ``false``
    when the tee sheet is closed, which yields no tee times.
    """
    if not isinstance(payload, list):
        logger.debug(f"ForeUp payload is {type(payload).__name__}, not a list; no tee times")
        return []

    tee_times: list[TeeTime] = []
    for record in payload:
        tee_time = parse_foreup_record(record)
        if tee_time:
            tee_times.append(tee_time)

    dropped = len(payload) - len(tee_times)
    if dropped:
        logger.debug(f"ForeUp: dropped {dropped} of {len(payload)} records")
    return tee_times


def parse_foreup_record(record: Any) -> TeeTime | None:
    """Parse a single ForeUp slot object, or return None if it is incomplete."""
    if not isinstance(record, dict):
        return None

    if any(record.get(field) is None for field in FOREUP_REQUIRED_FIELDS):
        return None

    try:
        raw_time = record["time"]
        course_name = record["course_name"]
        if not isinstance(raw_time, str) or not isinstance(course_name, str):
            return None
        course_name = clean_text(course_name)
        if not course_name:
            return None

        start = datetime.strptime(raw_time.strip(), FOREUP_TIME_FORMAT)
        return TeeTime(
            time=format_display_time(start),
            course_name=course_name,
            available_spots=_parse_spots(record["available_spots"]),
            green_fee=_parse_fee(record["green_fee"]),
        )
    except (TypeError, ValueError, InvalidOperation) as e:
        logger.debug(f"ForeUp: dropping record {record!r}: {e}")
        return None


def _parse_spots(value: Any) -> int:
    # bool is an int subclass; a flag is not a count
    if isinstance(value, bool):
        raise ValueError(f"available_spots is a boolean: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    raise ValueError(f"available_spots is not an integer: {value!r}")


def _parse_fee(value: Any) -> Decimal:
    if isinstance(value, bool):
        raise ValueError(f"green_fee is a boolean: {value!r}")
    fee = Decimal(str(value).strip())
    if not fee.is_finite():
        raise ValueError(f"green_fee is not finite: {value!r}")
    return fee.quantize(CENTS)


# ---------------------------------------------------------------------------
# GolfRev (HTML cards)
# ---------------------------------------------------------------------------


def extract_golfrev_html(html: str) -> list[TeeTime]:
    """
    Extract tee times from a GolfRev tee-sheet page.

    Each availability card looks like::

        <div class="v-card">
          <div class="v-card-title">7:30 AM</div>
          <div class="v-card-subtitle">Pine Hills</div>
          <div class="v-card-text">
            <span>1 - 4 players</span>
            <span> $45.00 </span>
          </div>
        </div>

    A page with no cards is not an error; it means nothing is bookable.
    """
    soup = BeautifulSoup(html, "html.parser")

    cards = soup.select(CARD_SELECTOR)
    if not cards:
        logger.debug("GolfRev: no availability cards in document")
        return []

    tee_times: list[TeeTime] = []
    for card in cards:
        tee_time = parse_golfrev_card(card)
        if tee_time:
            tee_times.append(tee_time)

    dropped = len(cards) - len(tee_times)
    if dropped:
        logger.debug(f"GolfRev: dropped {dropped} of {len(cards)} cards")
    return tee_times


def parse_golfrev_card(card: Tag) -> TeeTime | None:
    """Pull the four text pieces out of one card element and parse them."""
    title_elem = card.select_one(CARD_TITLE_SELECTOR)
    subtitle_elem = card.select_one(CARD_SUBTITLE_SELECTOR)
    # Players and price lines come from the card body only; course names can contain "Players"
    body = copy.copy(card)
    for header in body.select(f"{CARD_TITLE_SELECTOR}, {CARD_SUBTITLE_SELECTOR}"):
        header.decompose()
    lines = [clean_text(s) for s in body.stripped_strings]

    players_line = next((line for line in lines if PLAYERS_MARKER in line.lower()), None)
    price_line = next((line for line in lines if PRICE_RE.search(line)), None)

    return build_card_tee_time(
        title_elem.get_text(" ", strip=True) if title_elem else None,
        subtitle_elem.get_text(" ", strip=True) if subtitle_elem else None,
        players_line,
        price_line,
    )


def build_card_tee_time(
    time_text: str | None,
    course_text: str | None,
    players_text: str | None,
    price_text: str | None,
) -> TeeTime | None:
    """
    Build a TeeTime from the raw text of one card.

    Shared by the HTML extractor and the browser fallback, which reads the
    same four strings out of the live DOM.
    """
    time_text = clean_text(time_text)
    course_text = clean_text(course_text)
    players_text = clean_text(players_text)
    price_text = clean_text(price_text)

    if not (time_text and course_text and players_text and price_text):
        return None

    spots_match = SPOTS_RE.search(players_text)
    if not spots_match:
        logger.debug(f"GolfRev: no player count in {players_text!r}")
        return None

    price_match = PRICE_RE.search(price_text)
    if not price_match:
        logger.debug(f"GolfRev: no price in {price_text!r}")
        return None

    try:
        amount = price_match.group(1).replace(",", "") + (price_match.group(2) or "")
        return TeeTime(
            time=time_text,
            course_name=course_text,
            available_spots=int(spots_match.group(0)),
            green_fee=Decimal(amount).quantize(CENTS),
        )
    except (ValueError, InvalidOperation) as e:
        logger.debug(f"GolfRev: dropping card {time_text!r}: {e}")
        return None
