"""Shared pytest fixtures for the script generator test suite."""

import os
import tempfile

# Must be set before episode_data.database builds its engine
_ARCHIVE_DIR = tempfile.mkdtemp(prefix="script-archive-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_ARCHIVE_DIR, 'test_scripts.db')}"
os.environ.setdefault("GOOGLE_SHEETS_SPREADSHEET_ID", "test-spreadsheet")
os.environ["SCHEDULER_AUTOSTART"] = "false"

import datetime as dt

import pytest

from episode_data.database import db_manager
from episode_data.services import EpisodeService, ScriptArchiveService
from script_agents.common.config import AgentConfig
from script_agents.common.exceptions import RateLimitError

HEADERS = [
    "Category", "Podcast Title", "Topic", "Demand", "Supply", "Voice",
    "Host", "Main", "Bonus", "bonus name", "Date", "Status"
]

SHEET_ROWS = [
    HEADERS,
    ["Mental Health", "C-PTSD Recovery", "Emotional Flashbacks", "High", "Low", "Fabel", "Gregory",
     "Monday", "", "", "2026-11-01", ""],
    ["Fitness", "Running Basics", "Cardio", "High", "Low", "", "", "", "", "", "2026-11-02", ""],
    ["Mental Health", "CPTSD Recovery", "Inner Critic", "Moderate", "High", "", "", "",
     "Friday", "Healing", "", "Yes"],
    ["Mental-Health", "PTSD Recovery", "People Pleasing", "High"],
    ["Mental Health", "C-PTSD Recovery", "Boundaries", "Low", "", "", "", "",
     "Friday", "Boost", "12/15/2026", ""],
]


class FakeSheets:
    """In-memory stand-in for SheetsManager"""

    def __init__(self, rows=None):
        self.rows = [list(row) for row in (rows if rows is not None else SHEET_ROWS)]
        self.updates = []
        self.reads = []
        self.fail_connection = None

    def get_rows(self, range_):
        self.reads.append(range_)
        return [list(row) for row in self.rows]

    def update_cell(self, tab_name, row, column_index, value):
        self.updates.append((tab_name, row, column_index, value))
        target = self.rows[row - 1]
        while len(target) <= column_index:
            target.append("")
        target[column_index] = value
        return {"updatedCells": 1}

    def describe(self):
        return {"title": "Episode Plan", "tabs": [{"title": "c-ptsd recovery", "sheet_id": 0}]}

    def test_connection(self):
        if self.fail_connection:
            raise self.fail_connection
        return True


def script_text(episode_type, words_per_section=10, preamble="Here is your script."):
    lines = [preamble]
    for name in AgentConfig.get_section_names(episode_type):
        lines.append(f"## {name}")
        lines.append(" ".join(["word"] * words_per_section))
    return "\n".join(lines)


class FakeOpenAI:
    """Duck-typed OpenAIManager returning canned completions"""

    def __init__(self, fail_topics=()):
        self.calls = []
        self.fail_topics = set(fail_topics)
        self.available = True

    def is_available(self):
        return self.available

    def test_connection(self):
        return True

    def complete(self, system_prompt, user_prompt, max_tokens, temperature, model=None, **kwargs):
        self.calls.append({
            "system_prompt": system_prompt,
            "user_prompt": user_prompt,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "model": model,
            **kwargs
        })

        for topic in self.fail_topics:
            if topic in user_prompt:
                raise RateLimitError("OpenAI API rate limit exceeded. Please try again later.", code=429)

        if "episode titles" in system_prompt:
            return "  CPTSD: Emotional Flashbacks - Finding Your Way Back To Safety  ", {}
        if "searchable tags" in system_prompt:
            return "cptsd, trauma, healing, ,mental health,flashbacks", {}
        if "marketing expert" in system_prompt:
            return "An episode about healing.", {}
        if "Friday Healing Episode" in user_prompt:
            return script_text("friday"), {"total_tokens": 42}
        return script_text("main"), {"total_tokens": 42}


@pytest.fixture(scope="session", autouse=True)
def archive_tables():
    db_manager.create_tables()
    yield


@pytest.fixture
def fake_sheets():
    return FakeSheets()


@pytest.fixture
def fake_openai():
    return FakeOpenAI()


@pytest.fixture
def episode_service(fake_sheets):
    return EpisodeService(sheets=fake_sheets, tab_name="c-ptsd recovery")


@pytest.fixture
def archive():
    return ScriptArchiveService()


@pytest.fixture
def today():
    return dt.date(2026, 10, 19)
