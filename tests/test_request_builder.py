from episode_data.schemas import Episode, EpisodeType
from script_agents.common.config import AgentConfig
from script_agents.services import ScriptRequestBuilder


def test_main_prompt_embeds_template():
    builder = ScriptRequestBuilder()
    request = builder.build_prompt(Episode(topic="Emotional Flashbacks"), EpisodeType.MAIN)

    assert request.episode_type == EpisodeType.MAIN
    assert "Topic: Emotional Flashbacks" in request.user_prompt
    assert "Main Podcast Episode" in request.user_prompt
    assert "~9,500 words" in request.user_prompt
    assert "1. Opening & Welcome (500 words) - Warm opening with episode preview" in request.user_prompt
    assert "9. Integration & Wrap-up (600 words)" in request.user_prompt
    assert "comprehensive coverage" in request.system_prompt
    assert request.temperature == 0.7
    assert request.top_p == 0.9
    assert request.max_tokens == AgentConfig.OPENAI_MAX_TOKENS


def test_sections_are_listed_in_template_order():
    request = ScriptRequestBuilder().build_prompt(Episode(topic="Boundaries"), EpisodeType.FRIDAY)
    positions = [request.user_prompt.index(name) for name in AgentConfig.get_section_names("friday")]
    assert positions == sorted(positions)
    assert "~3,200 words" in request.user_prompt
    assert "Friday healing episodes" in request.system_prompt


def test_persona_falls_back_to_configured_host():
    request = ScriptRequestBuilder().build_prompt(Episode(topic="Boundaries"), EpisodeType.FRIDAY)
    host = AgentConfig.PODCAST["host_name"]
    voice = AgentConfig.PODCAST["voice_style"]
    assert f"Host: {host} ({voice} voice)" in request.user_prompt
    assert request.system_prompt.startswith(f"You are {host},")


def test_persona_prefers_episode_host_and_voice():
    episode = Episode(topic="Boundaries", host="Dana", voice="Calm")
    request = ScriptRequestBuilder().build_prompt(episode, EpisodeType.MAIN)
    assert "Host: Dana (Calm voice)" in request.user_prompt
    assert "Follow Dana's warm" in request.user_prompt
    assert request.system_prompt.startswith("You are Dana,")


def test_build_is_deterministic():
    builder = ScriptRequestBuilder()
    episode = Episode(topic="Inner Critic")
    assert builder.build_prompt(episode, "main") == builder.build_prompt(episode, "main")


def test_topic_with_dollar_sign_is_kept_verbatim():
    request = ScriptRequestBuilder().build_prompt(Episode(topic="Costs of $healing"), EpisodeType.MAIN)
    assert "Topic: Costs of $healing" in request.user_prompt


def test_prompt_names_episode_template():
    request = ScriptRequestBuilder().build_prompt(Episode(topic="Emotional Flashbacks"), EpisodeType.MAIN)
    assert "- Type: Main Podcast Episode" in request.user_prompt
    assert "${" not in request.user_prompt
