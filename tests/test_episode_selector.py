import datetime as dt

import pytest

from episode_data.column_mapping import infer_columns
from episode_data.episode_selector import (
    add_months, determine_episode_type, episode_statistics, find_by_topic, is_processed,
    parse_date, scheduler_candidates, search_episodes, select_relevant, upcoming
)
from episode_data.exceptions import NotFoundError
from episode_data.schemas import Episode, EpisodeType

from conftest import HEADERS, SHEET_ROWS


@pytest.fixture
def episodes():
    return select_relevant(SHEET_ROWS, infer_columns(HEADERS))


def test_select_relevant_filters_category_and_title(episodes):
    assert [episode.topic for episode in episodes] == [
        "Emotional Flashbacks", "Inner Critic", "People Pleasing", "Boundaries"
    ]


def test_ids_are_ordinal_and_row_index_is_sheet_row(episodes):
    assert [episode.id for episode in episodes] == [1, 2, 3, 4]
    assert [episode.row_index for episode in episodes] == [2, 4, 5, 6]


def test_ragged_row_resolves_missing_cells_to_empty(episodes):
    people_pleasing = episodes[2]
    assert people_pleasing.demand == "High"
    assert people_pleasing.status == ""
    assert people_pleasing.date is None
    assert people_pleasing.processed is False


def test_episode_fields(episodes):
    flashbacks = episodes[0]
    assert flashbacks.date == dt.date(2026, 11, 1)
    assert flashbacks.host == "Gregory"
    assert flashbacks.main_day == "Monday"
    assert episodes[1].processed is True
    assert episodes[1].bonus_name == "Healing"
    assert episodes[3].date == dt.date(2026, 12, 15)


def test_fallback_to_ptsd_title():
    rows = [
        ["Category", "Title"],
        ["Wellness", "Living with PTSD"],
        ["Wellness", "Sleep"],
    ]
    episodes = select_relevant(rows, infer_columns(rows[0]))
    assert len(episodes) == 1
    assert episodes[0].title == "Living with PTSD"
    assert episodes[0].id == 1
    assert episodes[0].row_index == 2


def test_no_match_raises_not_found():
    rows = [["Category", "Title"], ["Wellness", "Sleep"]]
    with pytest.raises(NotFoundError):
        select_relevant(rows, infer_columns(rows[0]))


def test_upcoming_orders_dated_first_then_demand():
    episodes = [
        Episode(id=1, topic="undated low", demand="Low"),
        Episode(id=2, topic="late", date=dt.date(2026, 12, 1), demand="Low"),
        Episode(id=3, topic="undated high", demand="High"),
        Episode(id=4, topic="early", date=dt.date(2026, 11, 1), demand="Low"),
        Episode(id=5, topic="early high", date=dt.date(2026, 11, 1), demand="High"),
        Episode(id=6, topic="done", date=dt.date(2026, 10, 1), processed=True),
        Episode(id=7, topic="undated other", demand="urgent"),
    ]
    ranked = upcoming(episodes, 10)
    assert [episode.id for episode in ranked] == [5, 4, 2, 3, 1, 7]


def test_upcoming_is_stable_and_truncates():
    episodes = [Episode(id=i, topic=f"t{i}", demand="High") for i in range(1, 6)]
    assert [episode.id for episode in upcoming(episodes, 3)] == [1, 2, 3]
    assert upcoming(episodes, 0) == []


def test_demand_match_is_exact():
    episodes = [Episode(id=1, demand="high"), Episode(id=2, demand="High")]
    assert [episode.id for episode in upcoming(episodes, 5)] == [2, 1]


def test_find_by_topic_matches_topic_or_title(episodes):
    assert find_by_topic(episodes, "inner").topic == "Inner Critic"
    assert find_by_topic(episodes, "c-ptsd recovery").topic == "Emotional Flashbacks"
    with pytest.raises(NotFoundError):
        find_by_topic(episodes, "gardening")


def test_search_and_statistics(episodes):
    assert [episode.id for episode in search_episodes(episodes, "mental-health")] == [3]
    stats = episode_statistics(episodes)
    assert stats["total_episodes"] == 4
    assert stats["processed_count"] == 1
    assert stats["unprocessed_count"] == 3
    assert stats["by_demand"]["High"] == 2


@pytest.mark.parametrize("text,expected", [
    ("2025-03-01", dt.date(2025, 3, 1)),
    ("2025-03-01T10:00:00", dt.date(2025, 3, 1)),
    (" 03/01/2025 ", dt.date(2025, 3, 1)),
    ("03-01-2025", dt.date(2025, 3, 1)),
    ("2025/03/01", dt.date(2025, 3, 1)),
    ("March 1, 2025", dt.date(2025, 3, 1)),
    ("Mar 1, 2025", dt.date(2025, 3, 1)),
    ("1 March 2025", dt.date(2025, 3, 1)),
    ("next week", None),
    ("", None),
])
def test_parse_date(text, expected):
    assert parse_date(text) == expected


def test_is_processed_values():
    assert is_processed(" YES ")
    assert is_processed("Generated")
    assert not is_processed("pending")
    assert not is_processed("")


def test_add_months_clamps_to_month_end():
    assert add_months(dt.date(2026, 12, 31), 2) == dt.date(2027, 2, 28)
    assert add_months(dt.date(2026, 10, 19), 2) == dt.date(2026, 12, 19)


def test_scheduler_candidates(episodes, today):
    candidates = scheduler_candidates(episodes, today)
    assert [episode.topic for episode in candidates] == [
        "Emotional Flashbacks", "People Pleasing", "Boundaries"
    ]
    assert [episode.id for episode in scheduler_candidates(episodes, today, processed_ids={1})] == [3, 4]


def test_scheduler_candidates_window_and_demand(today):
    episodes = [
        Episode(id=1, date=dt.date(2026, 10, 18), demand="High"),
        Episode(id=2, date=dt.date(2026, 12, 19), demand="Low"),
        Episode(id=3, date=dt.date(2026, 12, 20), demand="High"),
        Episode(id=4, demand="Moderate"),
        Episode(id=5, date=today),
    ]
    assert [episode.id for episode in scheduler_candidates(episodes, today)] == [2, 5]


def test_determine_episode_type():
    assert determine_episode_type(Episode(bonus_day="Friday")) == EpisodeType.FRIDAY
    assert determine_episode_type(Episode(bonus_name="Boost")) == EpisodeType.FRIDAY
    assert determine_episode_type(Episode(bonus_day="friday")) == EpisodeType.MAIN
    assert determine_episode_type(Episode()) == EpisodeType.MAIN
