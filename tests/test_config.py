import pytest
import yaml

from healthfeed.config import Config, ConfigModel, load_config, save_config
from healthfeed.generation import MockLLMProvider, OpenAIProvider
from healthfeed.ingestion import NewsAPIFetcher
from healthfeed.pipeline import build_coordinator, get_llm_provider, get_news_source


@pytest.fixture
def no_keys(monkeypatch):
    monkeypatch.delenv("NEWS_API_KEY", raising=False)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)


def write_config(path, data):
    path.write_text(yaml.safe_dump(data))
    return path


def test_defaults():
    config = ConfigModel()

    assert config.news.country == "us"
    assert config.news.category == "health"
    assert config.cache.ttl_minutes == 30
    assert config.cache.page_size == 5
    assert config.enrichment.warmup_seconds == 10
    assert config.enrichment.item_delay_seconds == 5


def test_country_is_normalized():
    assert ConfigModel(news={"country": " GB "}).news.country == "gb"
    with pytest.raises(ValueError):
        ConfigModel(news={"country": "usa"})


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "nested" / "config.yaml"
    save_config(ConfigModel(news={"country": "ca"}, cache={"ttl_minutes": 10}), path)

    loaded = load_config(path)

    assert loaded.news.country == "ca"
    assert loaded.cache.ttl_minutes == 10


def test_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")

    assert load_config(path) == ConfigModel()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yaml")


def test_invalid_values(tmp_path):
    path = write_config(tmp_path / "config.yaml", {"cache": {"page_size": 0}})

    with pytest.raises(ValueError, match="Invalid configuration"):
        load_config(path)


def test_invalid_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("news: [unclosed")

    with pytest.raises(ValueError, match="Invalid YAML"):
        load_config(path)


def test_config_path_from_environment(tmp_path, monkeypatch):
    path = write_config(tmp_path / "config.yaml", {"news": {"country": "au"}})
    monkeypatch.setenv("HEALTHFEED_CONFIG", str(path))

    assert Config().config.news.country == "au"


def test_api_keys_resolved_from_environment(tmp_path, monkeypatch):
    path = write_config(tmp_path / "config.yaml", {})
    monkeypatch.setenv("NEWS_API_KEY", "news-secret")
    monkeypatch.setenv("OPENAI_API_KEY", "llm-secret")

    config = Config(path)

    assert config.get_news_config()["api_key"] == "news-secret"
    assert config.get_llm_config()["api_key"] == "llm-secret"


def test_mock_provider_without_llm_key(tmp_path, no_keys):
    config = Config(write_config(tmp_path / "config.yaml", {}))
    assert isinstance(get_llm_provider(config), MockLLMProvider)


def test_explicit_mock_provider(tmp_path, monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "llm-secret")
    config = Config(write_config(tmp_path / "config.yaml", {"llm": {"provider": "mock"}}))

    assert isinstance(get_llm_provider(config), MockLLMProvider)


def test_openai_provider_with_key(tmp_path, monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "llm-secret")
    config = Config(write_config(tmp_path / "config.yaml", {"llm": {"model": "gpt-4o"}}))

    provider = get_llm_provider(config)

    assert isinstance(provider, OpenAIProvider)
    assert provider.model == "gpt-4o"


def test_news_source_requires_key(tmp_path, no_keys):
    config = Config(write_config(tmp_path / "config.yaml", {}))

    with pytest.raises(ValueError, match="NEWS_API_KEY"):
        get_news_source(config)


def test_build_coordinator_uses_settings(tmp_path, no_keys, monkeypatch):
    monkeypatch.setenv("NEWS_API_KEY", "news-secret")
    config = Config(
        write_config(
            tmp_path / "config.yaml",
            {
                "news": {"country": "gb", "page_size": 40},
                "cache": {"ttl_minutes": 5, "page_size": 10},
                "enrichment": {"warmup_seconds": 0, "item_delay_seconds": 1},
            },
        )
    )

    coordinator = build_coordinator(config)

    assert isinstance(coordinator.news_source, NewsAPIFetcher)
    assert coordinator.news_source.page_size == 40
    assert coordinator.country == "gb"
    assert coordinator.page_size == 10
    assert coordinator.cache.ttl_seconds == 300
    assert coordinator.batch.delays.item_delay_seconds == 1
    assert isinstance(coordinator.engine.llm_provider, MockLLMProvider)
