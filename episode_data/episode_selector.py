"""
Episode classification, filtering and ranking over raw sheet rows.
"""
import calendar
import datetime as dt
import logging
from collections import Counter
from typing import Any, Collection, Dict, List, Optional, Sequence

from .exceptions import NotFoundError
from .schemas import ColumnMap, Episode, EpisodeType

logger = logging.getLogger(__name__)

MENTAL_HEALTH_TERMS = ("mental health", "mental-health", "mentalhealth")
CPTSD_TERMS = ("c-ptsd", "cptsd", "ptsd recovery", "ptsd")
FALLBACK_TITLE_TERM = "ptsd"

PROCESSED_VALUES = {"yes", "true", "done", "complete", "finished", "generated"}

DEMAND_RANK = {"High": 3, "Moderate": 2, "Low": 1}

FRIDAY_BONUS_NAMES = ("Healing", "Boost")

DATE_FORMATS = (
    "%m/%d/%Y",
    "%m-%d-%Y",
    "%Y/%m/%d",
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
    "%d %b %Y",
)


def parse_date(value: Optional[str]) -> Optional[dt.date]:
    """Parse a sheet date cell, returning None when it cannot be read"""
    if not value or not value.strip():
        return None

    text = value.strip()

    try:
        return dt.date.fromisoformat(text)
    except ValueError:
        pass

    try:
        return dt.datetime.fromisoformat(text).date()
    except ValueError:
        pass

    for date_format in DATE_FORMATS:
        try:
            return dt.datetime.strptime(text, date_format).date()
        except ValueError:
            continue

    return None


def is_processed(status: Optional[str]) -> bool:
    if not status:
        return False
    return status.strip().lower() in PROCESSED_VALUES


def demand_rank(demand: str) -> int:
    return DEMAND_RANK.get(demand, 0)


def build_episode(row: Sequence[Any], column_map: ColumnMap, row_index: int, episode_id: int = 0) -> Episode:
    """Resolve one raw row into an Episode"""
    status = column_map.cell(row, "status")
    return Episode(
        id=episode_id,
        category=column_map.cell(row, "category"),
        title=column_map.cell(row, "title"),
        topic=column_map.cell(row, "topic"),
        demand=column_map.cell(row, "demand"),
        supply=column_map.cell(row, "supply"),
        voice=column_map.cell(row, "voice"),
        host=column_map.cell(row, "host"),
        main_day=column_map.cell(row, "main"),
        bonus_day=column_map.cell(row, "bonus"),
        bonus_name=column_map.cell(row, "bonus_name"),
        date=parse_date(column_map.cell(row, "date")),
        status=status,
        processed=is_processed(status),
        row_index=row_index
    )


def _contains_any(text: str, terms: Sequence[str]) -> bool:
    lowered = text.lower()
    return any(term in lowered for term in terms)


def is_relevant(episode: Episode) -> bool:
    return (
        _contains_any(episode.category, MENTAL_HEALTH_TERMS) and
        _contains_any(episode.title, CPTSD_TERMS)
    )


def select_relevant(rows: Sequence[Sequence[Any]], column_map: ColumnMap) -> List[Episode]:
    """
    Map every data row to an Episode and keep the CPTSD Recovery ones

    Args:
        rows: Raw sheet grid, header row first
        column_map: Column indices inferred from the header row

    Returns:
        Matched episodes with ids numbered 1..n in sheet order

    Raises:
        NotFoundError: If neither the strict nor the broader filter matches
    """
    # Data rows start at sheet row 2
    episodes = [
        build_episode(row, column_map, row_index=position)
        for position, row in enumerate(rows[1:], start=2)
    ]

    matched = [episode for episode in episodes if is_relevant(episode)]

    if not matched:
        logger.warning("No CPTSD Recovery data found with current filters, trying broader search")
        matched = [
            episode for episode in episodes
            if FALLBACK_TITLE_TERM in episode.title.lower()
        ]
        if matched:
            logger.info("Found %d rows with broader search", len(matched))

    if not matched:
        raise NotFoundError("No CPTSD Recovery data found even with broader search")

    return [
        episode.model_copy(update={"id": ordinal})
        for ordinal, episode in enumerate(matched, start=1)
    ]


def _upcoming_sort_key(episode: Episode):
    return (
        episode.date is None,
        episode.date or dt.date.max,
        -demand_rank(episode.demand)
    )


def upcoming(episodes: Sequence[Episode], limit: int) -> List[Episode]:
    """
    Rank unprocessed episodes for near-term generation

    Dated episodes come first (earliest first), then undated ones; ties are
    broken by demand (High > Moderate > Low > anything else) and finally by
    original order, since the sort is stable.
    """
    pending = [episode for episode in episodes if not episode.processed]
    return sorted(pending, key=_upcoming_sort_key)[:max(limit, 0)]


def find_by_topic(episodes: Sequence[Episode], query: str) -> Episode:
    needle = query.lower()
    for episode in episodes:
        if needle in episode.topic.lower() or needle in episode.title.lower():
            return episode
    raise NotFoundError(f'Episode with topic "{query}" not found')


def search_episodes(episodes: Sequence[Episode], query: str) -> List[Episode]:
    needle = query.lower()
    return [
        episode for episode in episodes
        if needle in episode.topic.lower()
        or needle in episode.title.lower()
        or needle in episode.category.lower()
    ]


def episode_statistics(episodes: Sequence[Episode]) -> Dict[str, Any]:
    processed_count = sum(1 for episode in episodes if episode.processed)
    return {
        "total_episodes": len(episodes),
        "by_demand": dict(Counter(episode.demand for episode in episodes)),
        "by_supply": dict(Counter(episode.supply for episode in episodes)),
        "by_category": dict(Counter(episode.category for episode in episodes)),
        "by_voice": dict(Counter(episode.voice for episode in episodes)),
        "by_status": dict(Counter(episode.status for episode in episodes)),
        "processed_count": processed_count,
        "unprocessed_count": len(episodes) - processed_count
    }


def add_months(day: dt.date, months: int) -> dt.date:
    """Shift a date by calendar months, clamping to the end of short months"""
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return dt.date(year, month, min(day.day, last_day))


def scheduler_candidates(
    episodes: Sequence[Episode],
    today: dt.date,
    processed_ids: Collection[int] = (),
    lookahead_months: int = 2
) -> List[Episode]:
    """
    Episodes the scheduler should generate on this run

    Dated episodes qualify inside [today, today + lookahead]; undated ones
    qualify only when their demand is High.
    """
    window_end = add_months(today, lookahead_months)
    candidates = []

    for episode in episodes:
        if episode.id in processed_ids or episode.processed:
            continue

        if episode.date:
            if today <= episode.date <= window_end:
                candidates.append(episode)
        elif episode.demand == "High":
            candidates.append(episode)

    return candidates


def determine_episode_type(episode: Episode) -> EpisodeType:
    if episode.bonus_day == "Friday" or episode.bonus_name in FRIDAY_BONUS_NAMES:
        return EpisodeType.FRIDAY
    return EpisodeType.MAIN
