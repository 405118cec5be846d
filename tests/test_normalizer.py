from conftest import make_raw

from healthfeed.ingestion import ArticleNormalizer, estimate_read_time
from healthfeed.models import Category, RawArticle


def test_read_time_defaults_to_one_minute():
    assert estimate_read_time(None) == "1 min read"
    assert estimate_read_time("") == "1 min read"
    assert estimate_read_time("   \n ") == "1 min read"


def test_read_time_rounds_up():
    assert estimate_read_time("word " * 200) == "1 min read"
    assert estimate_read_time("word " * 201) == "2 min read"
    assert estimate_read_time("word\tword\nword " * 150) == "3 min read"


def test_missing_fields_get_defaults():
    article = ArticleNormalizer().normalize(RawArticle(), article_id=7)

    assert article.id == 7
    assert article.title == "No title available"
    assert article.content == "No content available"
    assert article.source == "Unknown source"
    assert article.published_at
    assert article.read_time == "1 min read"
    assert article.tldr is None
    assert article.key_takeaways is None
    assert article.simplified_content is None
    assert article.is_summarized is False


def test_content_falls_back_to_description():
    raw = make_raw("Flu season arrives early", None, description="Clinics brace for a busy winter.")
    article = ArticleNormalizer().normalize(raw, article_id=1)

    assert article.content == "Clinics brace for a busy winter."
    assert article.category == Category.DISEASES_AND_TREATMENT


def test_raw_fields_pass_through():
    raw = RawArticle.model_validate(
        {
            "title": "Flu season arrives early",
            "content": "Influenza cases rise.",
            "source": {"id": "reuters", "name": "Reuters"},
            "author": "J. Doe",
            "url": "https://example.com/flu",
            "urlToImage": "https://example.com/flu.jpg",
            "publishedAt": "2025-01-05T08:00:00Z",
        }
    )
    article = ArticleNormalizer().normalize(raw, article_id=3)

    assert article.source == "Reuters"
    assert article.author == "J. Doe"
    assert article.url == "https://example.com/flu"
    assert article.url_to_image == "https://example.com/flu.jpg"
    assert article.published_at == "2025-01-05T08:00:00Z"
    assert article.normalized_title_key == "flu season arrives early"


def test_batch_assigns_ids_before_filtering():
    raws = [
        make_raw("Flu season arrives early", "Influenza cases rise."),
        make_raw("Hometown team wins the football game", "Fans celebrate."),
        make_raw("Teens report rising anxiety", "Counselors see more students."),
    ]
    articles = ArticleNormalizer().normalize_batch(raws)

    assert [a.id for a in articles] == [1, 3]
    assert all(not a.category.is_excluded for a in articles)


def test_batch_uses_explicit_seed():
    raws = [make_raw("Flu season arrives early", "Influenza cases rise.")]
    articles = ArticleNormalizer().normalize_batch(raws, start_id=40)

    assert [a.id for a in articles] == [40]


def test_batch_dedupes_by_title_keeping_first():
    raws = [
        make_raw("Flu Season Arrives Early ", "First report of influenza."),
        make_raw("Teens report rising anxiety", "Counselors see more students."),
        make_raw("  flu season arrives early", "Second report of influenza."),
    ]
    articles = ArticleNormalizer().normalize_batch(raws)

    assert [a.id for a in articles] == [1, 2]
    assert articles[0].content == "First report of influenza."
    keys = [a.normalized_title_key for a in articles]
    assert len(keys) == len(set(keys))


def test_blank_title_and_content_get_placeholders():
    raw = make_raw("   ", "  \n ", description="Clinics report a flu surge.")
    article = ArticleNormalizer().normalize(raw, article_id=1)

    assert article.title == "No title available"
    assert article.normalized_title_key == "no title available"
    assert article.content == "Clinics report a flu surge."

    empty = ArticleNormalizer().normalize(make_raw("  Flu update  ", " ", description=" "), article_id=2)
    assert empty.title == "Flu update"
    assert empty.content == "No content available"
