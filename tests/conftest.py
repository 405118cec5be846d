import json

import pendulum
import pytest

from healthfeed.cache import NewsCache
from healthfeed.generation import BatchEnricher, DelayPolicy, EnrichmentEngine, MockLLMProvider
from healthfeed.ingestion import StaticNewsSource
from healthfeed.models import Article, Category, RawArticle
from healthfeed.pipeline import PipelineCoordinator

SUMMARY_JSON = json.dumps(
    {
        "tldr": "Researchers report a measurable drop in flu hospitalizations.",
        "keyTakeaways": [
            "Vaccination lowered hospital admissions",
            "Older adults benefited most",
            "Coverage gaps remain in rural areas",
        ],
    }
)


class FakeClock:
    """Controllable clock for cache freshness tests."""

    def __init__(self):
        self.now = pendulum.datetime(2025, 1, 1, 12, 0, 0, tz="UTC")

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now = self.now.add(seconds=seconds)


def make_article(article_id, title=None, **overrides):
    title = title or f"Flu outbreak update {article_id}"
    fields = {
        "id": article_id,
        "title": title,
        "content": f"Health officials track influenza cases in region {article_id}.",
        "source": "Health Wire",
        "published_at": "2025-01-01T10:00:00Z",
        "category": Category.DISEASES_AND_TREATMENT,
        "read_time": "1 min read",
        "normalized_title_key": title.strip().lower(),
    }
    fields.update(overrides)
    return Article(**fields)


def make_raw(title, content=None, **overrides):
    fields = {"title": title, "content": content, "source": {"id": None, "name": "Health Wire"}}
    fields.update(overrides)
    return RawArticle.model_validate(fields)


def health_raws(count):
    return [
        make_raw(f"Flu outbreak update {i}", f"Hospitals report new influenza cases, day {i}.")
        for i in range(1, count + 1)
    ]


def make_coordinator(raws=None, responses=None, clock=None, delays=None, batch=None, provider=None):
    source = StaticNewsSource(raws if raws is not None else health_raws(12))
    provider = provider or MockLLMProvider(responses)
    engine = EnrichmentEngine(provider, timeout=5.0)
    coordinator = PipelineCoordinator(
        news_source=source,
        engine=engine,
        cache=NewsCache(clock=clock or FakeClock()),
        batch=batch or BatchEnricher(engine, delays or DelayPolicy.none()),
    )
    return coordinator, source, provider


@pytest.fixture
def clock():
    return FakeClock()
