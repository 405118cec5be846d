import asyncio
import json

import pytest
from conftest import SUMMARY_JSON, make_article

from healthfeed.errors import GenerationError, GenerationErrorKind, SummaryParseError
from healthfeed.generation import (
    CALL_FALLBACK,
    PARSE_FALLBACK,
    EnrichmentEngine,
    LLMProvider,
    MockLLMProvider,
    extract_json_block,
    parse_summary,
)


class SlowProvider(LLMProvider):
    async def generate_text(self, prompt):
        await asyncio.sleep(5)
        return SUMMARY_JSON

    def get_usage_stats(self):
        return {}


def summarize_with(response):
    engine = EnrichmentEngine(MockLLMProvider([response]))
    return asyncio.run(engine.summarize(make_article(1)))


def test_parses_json_embedded_in_prose():
    summary = summarize_with(f"Here is the summary you asked for:\n{SUMMARY_JSON}\nHope this helps!")

    assert summary.tldr.startswith("Researchers report")
    assert len(summary.key_takeaways) == 3


def test_braces_inside_strings_do_not_end_the_block():
    payload = json.dumps(
        {"tldr": "Dosing {per kg} was revised.", "keyTakeaways": ["a } b", "c { d", "e"]}
    )
    assert extract_json_block(f"prefix {payload} suffix") == payload
    assert parse_summary(payload).tldr == "Dosing {per kg} was revised."


def test_no_json_gives_parse_fallback():
    assert summarize_with("I am unable to summarize this article.") == PARSE_FALLBACK


def test_malformed_json_gives_parse_fallback():
    assert summarize_with('{"tldr": "Half an object", "keyTakeaways": [') == PARSE_FALLBACK


def test_too_few_takeaways_gives_parse_fallback():
    payload = json.dumps({"tldr": "Short", "keyTakeaways": ["one", "two"]})
    assert summarize_with(payload) == PARSE_FALLBACK


def test_extra_takeaways_are_truncated():
    payload = json.dumps({"tldr": "Short", "keyTakeaways": ["one", "two", "three", "four"]})
    summary = summarize_with(payload)

    assert summary.key_takeaways == ["one", "two", "three"]


def test_parse_summary_raises_on_non_object():
    with pytest.raises(SummaryParseError):
        parse_summary("no braces here")


def test_call_failure_gives_call_fallback():
    summary = summarize_with(GenerationError("upstream down"))
    assert summary == CALL_FALLBACK


def test_request_summary_propagates_call_errors():
    engine = EnrichmentEngine(MockLLMProvider([GenerationError("quota", GenerationErrorKind.RATE_LIMITED)]))

    with pytest.raises(GenerationError) as info:
        asyncio.run(engine.request_summary(make_article(1)))
    assert info.value.rate_limited


def test_request_summary_degrades_on_parse_failure():
    engine = EnrichmentEngine(MockLLMProvider(["not json"]))
    assert asyncio.run(engine.request_summary(make_article(1))) == PARSE_FALLBACK


def test_simplify_returns_generated_text():
    engine = EnrichmentEngine(MockLLMProvider(["Plain language version."]))
    assert asyncio.run(engine.simplify(make_article(1))) == "Plain language version."


def test_simplify_fallback_keeps_original_content():
    article = make_article(4)
    engine = EnrichmentEngine(MockLLMProvider([RuntimeError("boom")]))

    text = asyncio.run(engine.simplify(article))

    assert text.startswith("We're having trouble processing this article right now.")
    assert article.content in text


def test_slow_provider_times_out():
    engine = EnrichmentEngine(SlowProvider(), timeout=0.01)

    with pytest.raises(GenerationError) as info:
        asyncio.run(engine.request_summary(make_article(1)))
    assert info.value.kind == GenerationErrorKind.TIMEOUT
    assert asyncio.run(engine.summarize(make_article(1))) == CALL_FALLBACK


def test_prompts_include_article_text():
    provider = MockLLMProvider()
    engine = EnrichmentEngine(provider)
    article = make_article(2)

    asyncio.run(engine.summarize(article))
    asyncio.run(engine.simplify(article))

    assert all(article.title in prompt and article.content in prompt for prompt in provider.calls)
    assert '"keyTakeaways"' in provider.calls[0]
    assert '"keyTakeaways"' not in provider.calls[1]
