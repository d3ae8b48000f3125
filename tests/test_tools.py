import asyncio

import pytest

from script_agents.common.exceptions import SheetsError
from script_agents.episode_manager.agent import EpisodeManagerAgent
from script_agents.script_writer.agent import ScriptWriterAgent

from conftest import FakeOpenAI


@pytest.fixture
def writer(fake_openai, episode_service, archive):
    return ScriptWriterAgent(openai_manager=fake_openai, episodes=episode_service, archive=archive)


@pytest.fixture
def manager(fake_openai, episode_service, archive):
    return EpisodeManagerAgent(openai_manager=fake_openai, episodes=episode_service, archive=archive)


def registered_names(agent):
    agent.register_tools()
    return {tool.name for tool in asyncio.run(agent.server.list_tools())}


def test_script_writer_registers_tools(writer):
    assert registered_names(writer) == {
        "generate_script",
        "generate_script_from_sheet",
        "generate_script_batch",
        "get_script_templates",
        "list_generated_scripts",
    }


def test_episode_manager_registers_tools(manager):
    assert registered_names(manager) == {
        "get_episodes",
        "get_upcoming_episodes",
        "get_episode_by_topic",
        "get_episode_statistics",
        "get_sheet_structure",
        "get_scheduler_status",
        "start_scheduler",
        "stop_scheduler",
        "run_scheduler_once",
        "check_health",
    }


def test_generate_script_success_envelope(writer):
    response = writer.generate_script_tool.execute("Emotional Flashbacks", "main")
    assert response["success"] is True
    assert response["agent"] == "script-writer"
    data = response["data"]
    assert data["episode_type"] == "main"
    assert data["metrics"]["total_words"] == 90
    assert data["metrics"]["target_words"] == 9500
    assert data["seo"]["tags"][0] == "cptsd"
    assert len(data["section_report"]) == 9


def test_validation_error_envelope(writer, fake_openai):
    response = writer.generate_script_tool.execute("ab", "weekly")
    assert response["success"] is False
    assert response["error"]["statusCode"] == 400
    assert response["error"]["details"]
    assert fake_openai.calls == []


def test_rate_limit_envelope(episode_service, archive):
    failing = FakeOpenAI(fail_topics={"Inner Critic"})
    writer = ScriptWriterAgent(openai_manager=failing, episodes=episode_service, archive=archive)
    response = writer.generate_script_tool.execute("Inner Critic", "main")
    assert response["error"]["statusCode"] == 429


def test_not_found_envelope(writer):
    response = writer.sheet_script_tool.execute("Gardening")
    assert response["success"] is False
    assert response["error"]["statusCode"] == 404


def test_sheet_script_uses_row_type(writer, fake_sheets):
    response = writer.sheet_script_tool.execute("Boundaries")
    assert response["data"]["episode_type"] == "friday"
    assert response["data"]["source"] == "sheet"
    assert response["data"]["episode"]["row_index"] == 6
    # Generating from the sheet does not mark the row processed
    assert fake_sheets.updates == []


def test_batch_envelope(episode_service, archive):
    failing = FakeOpenAI(fail_topics={"Inner Critic"})
    writer = ScriptWriterAgent(openai_manager=failing, episodes=episode_service, archive=archive)
    response = writer.batch_script_tool.execute([
        {"topic": "Inner Critic", "episode_type": "main"},
        {"topic": "Boundaries", "episode_type": "friday"},
    ], include_seo=False, include_description=False)

    assert response["success"] is True
    assert response["data"]["successful"] == 1
    assert response["data"]["failed"] == 1
    assert response["data"]["errors"][0]["topic"] == "Inner Critic"


def test_batch_too_large(writer):
    response = writer.batch_script_tool.execute([{"topic": "Boundaries", "episode_type": "main"}] * 6)
    assert response["error"]["statusCode"] == 400


def test_batch_rejects_non_bool_flags(writer, fake_openai):
    response = writer.batch_script_tool.execute(
        [{"topic": "Boundaries", "episode_type": "main"}], include_seo="yes"
    )
    assert response["success"] is False
    assert response["error"]["statusCode"] == 400
    assert "include_seo" in response["error"]["message"]
    assert fake_openai.calls == []


def test_templates(writer):
    data = writer.template_catalog_tool.execute()["data"]
    assert data["main"]["target_words"] == 9500
    assert len(data["main"]["sections"]) == 9
    assert data["friday"]["sections"][-1] == {
        "name": "Closing & Preview", "target": 300, "description": "Gentle wrap-up and next episode preview"
    }


def test_list_generated_scripts(writer):
    writer.generate_script_tool.execute("Emotional Flashbacks", "friday", include_seo=False, include_description=False)
    response = writer.script_archive_tool.execute(limit=1)
    assert response["data"]["count"] == 1
    assert response["data"]["scripts"][0]["topic"] == "Emotional Flashbacks"
    assert writer.script_archive_tool.execute(limit=0)["error"]["statusCode"] == 400


def test_episode_queries(manager):
    listing = manager.episode_browser_tool.list_episodes()
    assert listing["data"]["total"] == 4

    search = manager.episode_browser_tool.list_episodes(search="inner")
    assert [episode["topic"] for episode in search["data"]["episodes"]] == ["Inner Critic"]

    upcoming = manager.episode_browser_tool.get_upcoming(limit=1)
    assert upcoming["data"]["episodes"][0]["topic"] == "Emotional Flashbacks"

    missing = manager.episode_browser_tool.get_by_topic("Gardening")
    assert missing["error"]["statusCode"] == 404


def test_statistics_and_structure(manager):
    assert manager.sheet_insights_tool.get_statistics()["data"]["processed_count"] == 1
    assert manager.sheet_insights_tool.get_structure()["data"]["column_map"]["topic"] == 2


def test_sheet_failure_envelope(manager, fake_sheets):
    def broken(range_):
        raise SheetsError("Google Sheets read failed", code=403)

    fake_sheets.get_rows = broken
    response = manager.sheet_insights_tool.get_statistics()
    assert response["success"] is False
    assert response["error"]["statusCode"] == 500


def test_scheduler_run_once_and_status(manager, fake_sheets):
    response = manager.scheduler_control_tool.run_once()
    assert response["data"]["skipped"] is False
    assert response["data"]["successful"] == response["data"]["candidates"]
    assert len(fake_sheets.updates) == response["data"]["candidates"]

    again = manager.scheduler_control_tool.run_once()
    assert again["data"] == {"skipped": True}

    status = manager.scheduler_control_tool.get_status()["data"]
    assert status["is_running"] is False
    assert status["processed_count"] == response["data"]["successful"]


def test_stop_when_not_running(manager):
    response = manager.scheduler_control_tool.stop()
    assert response["success"] is True
    assert response["message"] == "Scheduler is not running"


def test_health(manager, fake_sheets, monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "test-key")
    monkeypatch.setenv("GOOGLE_SERVICE_ACCOUNT_FILE", "/tmp/key.json")
    healthy = manager.health_check_tool.execute()["data"]
    assert healthy["status"] == "healthy"
    assert isinstance(healthy["recent_events"], list)

    fake_sheets.fail_connection = SheetsError("Google Sheets metadata lookup failed", code=404)
    monkeypatch.delenv("OPENAI_API_KEY")
    degraded = manager.health_check_tool.execute()["data"]
    assert degraded["status"] == "degraded"
    assert degraded["dependencies"]["google_sheets"]["error"] == 404
    assert degraded["dependencies"]["environment"]["missing"] == ["OPENAI_API_KEY"]
