import pytest

from episode_data.column_mapping import COLUMN_ALIASES_VERSION
from episode_data.exceptions import NotFoundError
from episode_data.services import EpisodeService
from episode_data.sheets_client import a1_range

from conftest import FakeSheets


def test_reads_whole_tab(episode_service, fake_sheets):
    episodes = episode_service.get_episodes()
    assert len(episodes) == 4
    assert fake_sheets.reads == ["'c-ptsd recovery'!A:Z"]


def test_a1_range_escapes_quotes():
    assert a1_range("Gregory's plan", "L5") == "'Gregory''s plan'!L5"


def test_empty_sheet_is_not_found():
    with pytest.raises(NotFoundError):
        EpisodeService(sheets=FakeSheets([])).get_episodes()


def test_get_upcoming_and_lookup(episode_service):
    assert [episode.topic for episode in episode_service.get_upcoming(2)] == [
        "Emotional Flashbacks", "Boundaries"
    ]
    assert episode_service.get_by_topic("boundaries").row_index == 6


def test_structure(episode_service):
    structure = episode_service.get_structure()
    assert structure["column_map"]["status"] == 11
    assert structure["column_aliases_version"] == COLUMN_ALIASES_VERSION
    assert structure["sample_episode"]["topic"] == "Emotional Flashbacks"
    assert structure["sample_episode"]["date"] == "2026-11-01"
    assert structure["total_episodes"] == 4


def test_mark_processed_writes_status_cell(episode_service, fake_sheets):
    episode = episode_service.get_by_topic("People Pleasing")
    assert episode_service.mark_processed(episode) is True
    assert fake_sheets.updates == [("c-ptsd recovery", 5, 11, "Yes")]
    assert episode_service.get_by_topic("People Pleasing").processed


def test_mark_processed_follows_moved_row(episode_service, fake_sheets):
    episode = episode_service.get_by_topic("Boundaries")
    assert episode.row_index == 6

    # A row was inserted above the episode since it was fetched
    fake_sheets.rows.insert(1, ["Mental Health", "CPTSD Recovery", "New Topic", "Low"])

    assert episode_service.mark_processed(episode) is True
    assert fake_sheets.updates[-1][1] == 7


def test_mark_processed_when_row_is_gone(episode_service, fake_sheets):
    episode = episode_service.get_by_topic("Boundaries")
    del fake_sheets.rows[5]
    assert episode_service.mark_processed(episode) is False
    assert fake_sheets.updates == []


def test_mark_processed_without_status_column():
    sheets = FakeSheets([
        ["Category", "Podcast Title", "Topic"],
        ["Mental Health", "CPTSD Recovery", "Shame"],
    ])
    service = EpisodeService(sheets=sheets)
    assert service.mark_processed(service.get_episodes()[0]) is False
    assert sheets.updates == []
