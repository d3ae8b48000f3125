"""
Service layer for spreadsheet and database operations. Provides high-level functions for agents to use.
"""
import os
import logging
from typing import List, Optional, Dict, Any, Sequence

from .column_mapping import COLUMN_ALIASES_VERSION, infer_columns
from .database import db_manager
from .episode_selector import (
    episode_statistics, find_by_topic, search_episodes, select_relevant, upcoming
)
from .exceptions import NotFoundError
from .models import GeneratedScriptRecord, AgentEvent
from .schemas import (
    AgentEventCreate, ColumnMap, Episode, EpisodeSheet, GeneratedContent
)
from .sheets_client import SheetsManager, a1_range, sheets_manager

logger = logging.getLogger(__name__)

DEFAULT_TAB_NAME = "c-ptsd recovery"
PROCESSED_MARKER = "Yes"


class EpisodeService:
    """Service for reading episodes from the spreadsheet and writing status back"""

    def __init__(self, sheets: Optional[SheetsManager] = None, tab_name: Optional[str] = None):
        self.sheets = sheets or sheets_manager
        self.tab_name = tab_name or os.getenv("GOOGLE_SHEETS_TAB_NAME", DEFAULT_TAB_NAME)

    def _read_grid(self) -> List[List[str]]:
        rows = self.sheets.get_rows(a1_range(self.tab_name, "A:Z"))
        if not rows:
            raise NotFoundError(f"No data found in {self.tab_name} tab")
        return rows

    def fetch_sheet(self) -> EpisodeSheet:
        """Read the tab, infer its columns and resolve the matching episodes"""
        rows = self._read_grid()
        headers = [str(header) for header in rows[0]]
        logger.info("Found headers in Google Sheets: %s", headers)

        column_map = infer_columns(headers)
        logger.debug("Column mapping found: %s", column_map.model_dump())

        episodes = select_relevant(rows, column_map)
        logger.info("Retrieved %d CPTSD Recovery episodes from Google Sheets", len(episodes))

        return EpisodeSheet(
            headers=headers,
            column_map=column_map,
            episodes=episodes,
            total_episodes=len(episodes)
        )

    def get_episodes(self) -> List[Episode]:
        return self.fetch_sheet().episodes

    def get_upcoming(self, limit: int = 5) -> List[Episode]:
        return upcoming(self.get_episodes(), limit)

    def get_by_topic(self, topic: str) -> Episode:
        return find_by_topic(self.get_episodes(), topic)

    def search(self, query: str) -> List[Episode]:
        return search_episodes(self.get_episodes(), query)

    def get_statistics(self) -> Dict[str, Any]:
        return episode_statistics(self.get_episodes())

    def get_structure(self) -> Dict[str, Any]:
        """Headers, resolved column map and a sample episode"""
        sheet = self.fetch_sheet()
        return {
            "headers": sheet.headers,
            "column_map": sheet.column_map.model_dump(),
            "column_aliases_version": COLUMN_ALIASES_VERSION,
            "sample_episode": sheet.episodes[0].model_dump(mode="json") if sheet.episodes else None,
            "total_episodes": sheet.total_episodes
        }

    def mark_processed(self, episode: Episode) -> bool:
        """
        Write the processed marker into the episode's status cell

        The sheet is re-read first so the write lands on the row that holds
        this episode now, even if rows moved since the episode was fetched.

        Returns:
            True if the cell was written, False if there is no status column
            or the episode row can no longer be found

        Raises:
            SheetsError: If the spreadsheet read or write fails
        """
        rows = self._read_grid()
        column_map = infer_columns(rows[0])

        if not column_map.has("status"):
            logger.warning("No status column found to mark episode as processed (topic=%s)", episode.topic)
            return False

        row_index = self._resolve_row(rows, column_map, episode)
        if row_index is None:
            logger.warning(
                "Episode row no longer present in sheet (episode_id=%s, topic=%s)",
                episode.id, episode.topic
            )
            return False

        self.sheets.update_cell(self.tab_name, row_index, column_map.status, PROCESSED_MARKER)

        logger.info(
            "Episode marked as processed in Google Sheets (episode_id=%s, row=%s, topic=%s)",
            episode.id, row_index, episode.topic
        )
        return True

    @staticmethod
    def _resolve_row(rows: Sequence[Sequence[Any]], column_map: ColumnMap, episode: Episode) -> Optional[int]:
        def holds_episode(row) -> bool:
            return (
                column_map.cell(row, "title") == episode.title and
                column_map.cell(row, "topic") == episode.topic
            )

        if 2 <= episode.row_index <= len(rows) and holds_episode(rows[episode.row_index - 1]):
            return episode.row_index

        for position, row in enumerate(rows[1:], start=2):
            if holds_episode(row):
                return position
        return None


class ScriptArchiveService:
    """Service for storing generated scripts"""

    def save_content(self, content: GeneratedContent) -> Dict[str, Any]:
        """Store generated script, SEO and description"""
        with db_manager.session_scope() as session:
            record = GeneratedScriptRecord(
                episode_ref=content.episode_ref,
                topic=content.topic,
                episode_type=content.episode_type.value,
                source=content.source,
                sheet_row=content.episode.row_index if content.episode else None,
                total_words=content.script.total_words,
                section_count=len(content.script.sections),
                sections=[
                    {"name": section.name, "word_count": section.word_count}
                    for section in content.script.sections
                ],
                full_text=content.script.full_text,
                seo_title=content.seo.title if content.seo else None,
                seo_tags=content.seo.tags if content.seo else None,
                description=content.description,
                status=content.status
            )
            session.add(record)
            session.flush()
            session.refresh(record)
            return self._to_dict(record)

    def list_recent(self, limit: int = 10) -> List[Dict[str, Any]]:
        with db_manager.session_scope() as session:
            records = session.query(GeneratedScriptRecord).order_by(
                GeneratedScriptRecord.id.desc()
            ).limit(limit).all()
            return [self._to_dict(record) for record in records]

    def count(self) -> int:
        with db_manager.session_scope() as session:
            return session.query(GeneratedScriptRecord).count()

    @staticmethod
    def _to_dict(record: GeneratedScriptRecord) -> Dict[str, Any]:
        return {
            'id': record.id,
            'episode_ref': record.episode_ref,
            'topic': record.topic,
            'episode_type': record.episode_type,
            'source': record.source,
            'sheet_row': record.sheet_row,
            'total_words': record.total_words,
            'section_count': record.section_count,
            'sections': record.sections,
            'seo_title': record.seo_title,
            'seo_tags': record.seo_tags,
            'description': record.description,
            'status': record.status,
            'created_at': record.created_at.isoformat() if record.created_at else None
        }


class EventService:
    """Service for logging agent events"""

    def log_event(self, event_data: AgentEventCreate) -> Dict[str, Any]:
        """Log an agent event"""
        with db_manager.session_scope() as session:
            event = AgentEvent(**event_data.model_dump())
            session.add(event)
            session.flush()
            return {'id': event.id, 'agent_name': event.agent_name, 'event_type': event.event_type}

    def get_recent_events(self, limit: int = 50) -> List[Dict[str, Any]]:
        with db_manager.session_scope() as session:
            events = session.query(AgentEvent).order_by(AgentEvent.id.desc()).limit(limit).all()
            return [
                {
                    'agent_name': event.agent_name,
                    'event_type': event.event_type,
                    'topic': event.topic,
                    'message': event.message,
                    'payload': event.payload,
                    'created_at': event.created_at.isoformat() if event.created_at else None
                } for event in events
            ]

# Global service instances
episode_service = EpisodeService()
archive_service = ScriptArchiveService()
event_service = EventService()
