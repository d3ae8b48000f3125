"""
Header-row schema inference for the episode spreadsheet.

Spreadsheet authors rename columns now and then, so each logical field is
resolved against an ordered list of accepted header strings. Matching is an
exact, case-sensitive string comparison: a header outside these lists is
simply not found. Bump COLUMN_ALIASES_VERSION whenever the table changes.
"""
import logging
from typing import Dict, List, Sequence

from .schemas import ABSENT, ColumnMap

logger = logging.getLogger(__name__)

COLUMN_ALIASES_VERSION = "1"

COLUMN_ALIASES: Dict[str, List[str]] = {
    "category": ["Category", "category", "CATEGORY"],
    "title": ["Podcast Title", "PodcastTitle", "Title", "Podcast"],
    "topic": ["Topic", "topic", "TOPIC", "Subject"],
    "demand": ["Demand", "demand", "DEMAND", "Priority"],
    "supply": ["Supply", "supply", "SUPPLY", "Availability"],
    "voice": ["Voice", "voice", "VOICE", "Style"],
    "host": ["Host", "host", "HOST", "Presenter"],
    "main": ["Main", "main", "MAIN", "Primary Day", "Monday"],
    "bonus": ["Bonus", "bonus", "BONUS", "Secondary Day", "Friday"],
    "bonus_name": ["bonus name", "Bonus Name", "BonusName", "Secondary Type"],
    "date": ["Date", "date", "DATE", "Episode Date", "Publish Date", "Air Date"],
    "status": ["Status", "status", "STATUS", "Created?", "Processed", "Script Generated", "Done"],
}


def find_column_index(headers: Sequence[str], possible_names: Sequence[str]) -> int:
    """Index of the first header equal to one of the names, tried in order"""
    for name in possible_names:
        for index, header in enumerate(headers):
            if header == name:
                return index
    return ABSENT


def infer_columns(header_row: Sequence[str]) -> ColumnMap:
    """Resolve every logical field of the alias table against a header row"""
    column_map = ColumnMap(**{
        field: find_column_index(header_row, aliases)
        for field, aliases in COLUMN_ALIASES.items()
    })

    missing = [field for field in COLUMN_ALIASES if not column_map.has(field)]
    if missing:
        logger.info("Columns not found in sheet header: %s", ", ".join(missing))

    return column_map


def column_letter(column_index: int) -> str:
    """Convert a zero-based column index to A1 notation (0 -> A, 26 -> AA)"""
    if column_index < 0:
        return "A"

    result = ""
    while column_index >= 0:
        result = chr(65 + column_index % 26) + result
        column_index = column_index // 26 - 1
    return result
