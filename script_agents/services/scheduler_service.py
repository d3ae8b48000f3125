"""
Daily scheduler that drafts scripts for upcoming episodes and marks them processed.
"""
import datetime as dt
import logging
import threading
import time
from typing import Any, Callable, Dict, Optional, Set
from zoneinfo import ZoneInfo

from episode_data.episode_selector import determine_episode_type, scheduler_candidates
from episode_data.exceptions import NotFoundError
from episode_data.schemas import Episode, EpisodeOutcome, RunSummary
from episode_data.services import EpisodeService

from ..common.config import AgentConfig
from .generation_service import ScriptGenerationService

logger = logging.getLogger(__name__)


class SchedulerService:
    """
    Runs once on start, then daily at the configured hour

    The processed-id set and last run time live only in memory; the sheet's
    status column is what survives a restart. Runs starting within the
    re-entry window of the previous run are skipped, whichever way they
    were triggered.
    """

    def __init__(
        self,
        episode_service: EpisodeService,
        generation_service: ScriptGenerationService,
        clock: Callable[[], float] = time.time,
        now_fn: Optional[Callable[[], dt.datetime]] = None,
        config: Optional[Dict[str, Any]] = None
    ):
        self.episode_service = episode_service
        self.generation_service = generation_service
        self.config = config or AgentConfig.EPISODE_MANAGER["scheduler"]
        self.timezone = ZoneInfo(self.config["timezone"])
        self.clock = clock
        self.now_fn = now_fn or (lambda: dt.datetime.now(self.timezone))

        self.is_running = False
        self.last_run: Optional[float] = None
        self.last_summary: Optional[RunSummary] = None
        self.processed_ids: Set[int] = set()

        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def start(self, run_immediately: bool = True) -> bool:
        if self.is_running:
            logger.warning("Scheduler is already running")
            return False

        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._loop,
            args=(self._stop_event, run_immediately),
            name="episode-scheduler",
            daemon=True
        )
        self.is_running = True
        self._thread.start()

        logger.info(
            "Scheduler started - will run daily at %02d:00 %s",
            self.config["run_hour"], self.config["timezone"]
        )
        return True

    def stop(self) -> bool:
        """Signal the timer thread; a run in progress finishes on its own"""
        if not self.is_running:
            logger.warning("Scheduler is not running")
            return False

        self._stop_event.set()
        self.is_running = False
        logger.info("Scheduler stopped")
        return True

    def _loop(self, stop_event: threading.Event, run_immediately: bool):
        if run_immediately:
            self._run_safely()

        while not stop_event.is_set():
            delay = (self.get_next_run_time() - self.now_fn()).total_seconds()
            if stop_event.wait(max(delay, 0)):
                break
            self._run_safely()

    def _run_safely(self):
        try:
            self.process_upcoming_episodes()
        except Exception:
            logger.exception("Scheduled episode processing failed")

    def run_once(self) -> Optional[RunSummary]:
        """Manual trigger, subject to the same re-entry window"""
        return self.process_upcoming_episodes()

    def process_upcoming_episodes(self) -> Optional[RunSummary]:
        """
        Generate scripts for every candidate episode, one at a time

        Returns:
            RunSummary of the run, or None when skipped by the re-entry window

        Raises:
            SheetsError: If the episode list cannot be read
        """
        window = self.config["reentry_window_seconds"]
        started = self.clock()
        if self.last_run is not None and started - self.last_run < window:
            logger.info("Skipping run - last run was less than %d seconds ago", window)
            return None

        self.last_run = started
        summary = RunSummary(started_at=self.now_fn())
        logger.info("Starting scheduled episode processing")

        try:
            episodes = self.episode_service.get_episodes()
        except NotFoundError as e:
            logger.warning("No episodes found in Google Sheets: %s", e)
            episodes = []

        candidates = scheduler_candidates(
            episodes,
            self.now_fn().date(),
            processed_ids=self.processed_ids,
            lookahead_months=self.config["lookahead_months"]
        )
        logger.info("Found %d upcoming episodes to process", len(candidates))

        summary.total_episodes = len(episodes)
        summary.candidates = len(candidates)
        for episode in candidates:
            outcome = self.process_episode(episode)
            summary.outcomes.append(outcome)
            if outcome.success:
                summary.successful += 1
            else:
                summary.failed += 1

        summary.finished_at = self.now_fn()
        self.last_summary = summary

        logger.info(
            "Scheduled episode processing completed (candidates=%d, successful=%d, failed=%d)",
            summary.candidates, summary.successful, summary.failed
        )
        return summary

    def process_episode(self, episode: Episode) -> EpisodeOutcome:
        episode_type = determine_episode_type(episode)
        logger.info(
            "Processing episode (topic=%s, type=%s, date=%s, demand=%s)",
            episode.topic, episode_type.value, episode.date, episode.demand
        )

        try:
            content = self.generation_service.generate_content(episode, episode_type, source="scheduler")
            status_updated = self.episode_service.mark_processed(episode)
        except Exception as e:
            logger.error("Failed to process episode (topic=%s): %s", episode.topic, e)
            return EpisodeOutcome(
                episode_id=episode.id,
                topic=episode.topic,
                success=False,
                episode_type=episode_type,
                error=str(e)
            )

        self.processed_ids.add(episode.id)
        logger.info(
            "Episode processed successfully (topic=%s, type=%s, words=%d)",
            episode.topic, episode_type.value, content.script.total_words
        )
        return EpisodeOutcome(
            episode_id=episode.id,
            topic=episode.topic,
            success=True,
            episode_type=episode_type,
            total_words=content.script.total_words,
            status_updated=status_updated
        )

    def get_next_run_time(self) -> dt.datetime:
        now = self.now_fn().astimezone(self.timezone)
        run_time = dt.time(hour=self.config["run_hour"])
        candidate = dt.datetime.combine(now.date(), run_time, tzinfo=self.timezone)
        if candidate <= now:
            candidate = dt.datetime.combine(now.date() + dt.timedelta(days=1), run_time, tzinfo=self.timezone)
        return candidate

    def get_status(self) -> Dict[str, Any]:
        last_run = (
            dt.datetime.fromtimestamp(self.last_run, tz=self.timezone).isoformat()
            if self.last_run is not None else None
        )
        return {
            "is_running": self.is_running,
            "last_run": last_run,
            "processed_count": len(self.processed_ids),
            "processed_ids": sorted(self.processed_ids),
            "next_run": self.get_next_run_time().isoformat(),
            "timezone": self.config["timezone"],
            "last_summary": self.last_summary.model_dump(mode="json") if self.last_summary else None
        }
