"""Domain service for extracting manufacturing and expiry dates from label text."""

from __future__ import annotations

import logging
import re
from datetime import date

from ..value_objects import DurationUnit, ExtractedDates, ShelfLife

logger = logging.getLogger(__name__)

_MONTH_YEAR = r"(\d{1,2})[/\-](\d{4})"

BARE_DATE_PATTERN = re.compile(_MONTH_YEAR, re.ASCII)
MFG_LABEL_PATTERN = re.compile(
    rf"(?:mfg|manufacturing|manufactured)\s*:?\s*{_MONTH_YEAR}", re.ASCII
)
EXP_LABEL_PATTERN = re.compile(rf"(?:exp|expiry|expires)\s*:?\s*{_MONTH_YEAR}", re.ASCII)
BEST_BEFORE_PATTERN = re.compile(
    r"best\s+before\s+(\d+)\s*(month|months|year|years|yr|yrs)", re.ASCII
)

_WHITESPACE = re.compile(r"\s+")


def normalize_label_text(text: str) -> str:
    """Case-fold and collapse whitespace so matching ignores case and spacing."""
    return _WHITESPACE.sub(" ", text.casefold()).strip()


def _month_start(month_token: str, year_token: str) -> date | None:
    """Build the first day of a month, or None if the month/year is not a valid date."""
    month = int(month_token)
    year = int(year_token)
    if not 1 <= month <= 12:
        return None
    try:
        return date(year, month, 1)
    except ValueError:
        return None


def _labeled_spans(text: str) -> list[tuple[int, int]]:
    """Spans of month/year tokens that follow an MFG or EXP marker."""
    return [
        (match.start(1), match.end(2))
        for pattern in (MFG_LABEL_PATTERN, EXP_LABEL_PATTERN)
        for match in pattern.finditer(text)
    ]


def _find_bare_dates(text: str) -> list[date]:
    """Collect valid unlabeled month/year tokens in order of appearance."""
    labeled = _labeled_spans(text)
    candidates: list[date] = []
    for match in BARE_DATE_PATTERN.finditer(text):
        if any(match.start() < end and start < match.end() for start, end in labeled):
            continue
        candidate = _month_start(match.group(1), match.group(2))
        if candidate is None:
            logger.debug("Dropping invalid month/year token %r", match.group(0))
            continue
        candidates.append(candidate)
    return candidates


def _find_labeled_date(pattern: re.Pattern[str], text: str) -> date | None:
    """Return the first labeled month/year that forms a valid date."""
    for match in pattern.finditer(text):
        candidate = _month_start(match.group(1), match.group(2))
        if candidate is not None:
            return candidate
    return None


def _find_shelf_life(text: str) -> ShelfLife | None:
    match = BEST_BEFORE_PATTERN.search(text)
    if match is None:
        return None
    return ShelfLife(count=int(match.group(1)), unit=DurationUnit.from_token(match.group(2)))


def _derive_expiry(manufactured: date, shelf_life: ShelfLife) -> date | None:
    try:
        return shelf_life.add_to(manufactured)
    except (ValueError, OverflowError):
        logger.debug("Best-before %s from %s is out of range", shelf_life, manufactured)
        return None


def extract_dates(label_text: str) -> ExtractedDates:
    """
    Infer manufacturing and expiry dates from free-form label text.

    Explicit MFG/EXP labels win. Otherwise the first unlabeled month/year is
    taken as the manufacturing date and the second as the expiry date. A
    "best before N months/years" duration is added to the manufacturing date
    only when no expiry date was found.

    Args:
        label_text: Transcribed label text, possibly empty.

    Returns:
        ExtractedDates with any field that could not be inferred left as None.
    """
    text = normalize_label_text(label_text)

    bare_dates = _find_bare_dates(text)
    labeled_mfg = _find_labeled_date(MFG_LABEL_PATTERN, text)
    labeled_exp = _find_labeled_date(EXP_LABEL_PATTERN, text)
    shelf_life = _find_shelf_life(text)

    manufacturing_date: date | None = None
    expiry_date: date | None = None

    if labeled_mfg is not None:
        manufacturing_date = labeled_mfg
    elif bare_dates:
        manufacturing_date = bare_dates[0]

    if labeled_exp is not None:
        expiry_date = labeled_exp
    elif len(bare_dates) > 1:
        expiry_date = bare_dates[1]

    if expiry_date is None and shelf_life is not None and manufacturing_date is not None:
        expiry_date = _derive_expiry(manufacturing_date, shelf_life)

    # Lone unlabeled date next to a best-before phrase anchors the duration
    if (
        manufacturing_date is None
        and expiry_date is None
        and len(bare_dates) == 1
        and shelf_life is not None
    ):
        manufacturing_date = bare_dates[0]
        expiry_date = _derive_expiry(manufacturing_date, shelf_life)

    return ExtractedDates(manufacturing_date=manufacturing_date, expiry_date=expiry_date)
