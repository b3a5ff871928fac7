"""
Tests for topic matching and ranking.
"""

import asyncio

import pytest

from residents.core.errors import CatalogError, TopicSearchError
from residents.core.settings import settings
from residents.services import topic_search
from residents.services.topic_catalog import TopicCatalog
from residents.services.topic_search import (
    is_candidate,
    normalize_query,
    rank_topics,
    search_issue_topics,
)


def _ids(topics):
    return [t.id for t in topics]


def test_normalize_query():
    assert normalize_query("  Pot HOLE ") == "pot hole"
    assert normalize_query("") == ""
    assert normalize_query(None) == ""


@pytest.mark.parametrize("query", ["", "   ", "\t\n"])
def test_empty_query_returns_nothing(catalog, query):
    assert rank_topics(catalog.topics, query) == []


def test_pothole_ranks_title_match_first(catalog):
    results = rank_topics(catalog.topics, "pothole")
    assert results[0].id == "rt_001"


def test_department_query_returns_whole_department_alphabetically(catalog):
    results = rank_topics(catalog.topics, "roads & transport")

    assert [t.title for t in results] == [
        "Damaged pavement",
        "Damaged road sign",
        "Faded road markings",
        "Pothole on road",
        "Traffic light malfunction",
    ]


def test_no_match_returns_empty(catalog):
    assert rank_topics(catalog.topics, "xyznotfound") == []


def test_single_character_query_respects_limit(catalog):
    results = rank_topics(catalog.topics, "a", limit=3)

    assert len(results) == 3
    for topic in results:
        assert is_candidate(topic, "a")


def test_partial_word_matches_department(catalog):
    # "ligh" is a prefix of "Street Lighting"
    results = rank_topics(catalog.topics, "ligh")
    assert {"sl_001", "sl_002", "sl_003"} <= set(_ids(results))


def test_title_matches_outrank_keyword_and_department_matches(catalog):
    results = rank_topics(catalog.topics, "flood")

    # Flooding matches on title; the other two only via the department name
    assert _ids(results) == ["df_002", "df_001", "df_003"]


def test_title_tier_sorted_alphabetically(catalog):
    results = rank_topics(catalog.topics, "light")

    assert [t.title for t in results] == [
        "Flickering street light",
        "Street light not working",
        "Street light on during day",
        "Traffic light malfunction",
    ]


def test_matching_is_case_insensitive(catalog):
    assert _ids(rank_topics(catalog.topics, "GRAFFITI")) == ["cs_001"]
    assert _ids(rank_topics(catalog.topics, "Spray Paint")) == ["cs_001"]


def test_punctuation_query_uses_substring_rule(catalog):
    results = rank_topics(catalog.topics, "&")
    # No title or keyword contains "&", only four department names do
    assert results
    assert all("&" in t.department for t in results)


def test_every_result_is_a_candidate(catalog):
    for query in ["road", "bin", "an", "e", "light", "broken"]:
        for topic in rank_topics(catalog.topics, query, limit=100):
            q = query.lower()
            assert (
                q in topic.title.lower()
                or any(q in k.lower() for k in topic.keywords)
                or q in topic.department.lower()
            )


def test_limit_gives_prefix_of_unlimited(catalog):
    full = rank_topics(catalog.topics, "e", limit=1000)
    for n in range(0, 12):
        assert rank_topics(catalog.topics, "e", limit=n) == full[:n]


def test_zero_limit_returns_nothing(catalog):
    assert rank_topics(catalog.topics, "road", limit=0) == []


def test_ranking_independent_of_catalog_order(small_topics):
    forward = TopicCatalog(small_topics)
    backward = TopicCatalog(list(reversed(small_topics)))

    for query in ["o", "road", "light", "a"]:
        assert rank_topics(forward.topics, query) == rank_topics(backward.topics, query)


def test_search_does_not_mutate_catalog(catalog):
    before = [t.model_dump() for t in catalog.topics]
    rank_topics(catalog.topics, "POTHOLE")
    assert [t.model_dump() for t in catalog.topics] == before


def test_async_search_is_idempotent(catalog):
    first = asyncio.run(search_issue_topics("bin", catalog=catalog))
    second = asyncio.run(search_issue_topics("bin", catalog=catalog))

    assert _ids(first) == _ids(second) == ["wm_004", "wm_001", "wm_003"]


def test_async_search_default_limit(catalog, monkeypatch):
    monkeypatch.setattr(settings, "SEARCH_DEFAULT_LIMIT", 2)
    results = asyncio.run(search_issue_topics("e", catalog=catalog))
    assert len(results) == 2


def test_async_search_uses_global_catalog():
    results = asyncio.run(search_issue_topics("pothole"))
    assert results[0].id == "rt_001"


def test_async_search_empty_query(catalog):
    assert asyncio.run(search_issue_topics("   ", catalog=catalog)) == []


def test_concurrent_searches_do_not_interfere(catalog, monkeypatch):
    monkeypatch.setattr(settings, "SEARCH_LATENCY_SECONDS", 0.01)

    async def run_all():
        return await asyncio.gather(
            search_issue_topics("bin", catalog=catalog),
            search_issue_topics("light", catalog=catalog),
            search_issue_topics("bin", catalog=catalog),
        )

    bins, lights, bins_again = asyncio.run(run_all())
    assert _ids(bins) == _ids(bins_again)
    assert _ids(lights) == _ids(rank_topics(catalog.topics, "light"))


def test_search_timeout_raises_search_error(catalog, monkeypatch):
    monkeypatch.setattr(settings, "SEARCH_LATENCY_SECONDS", 0.5)

    with pytest.raises(TopicSearchError, match="timed out"):
        asyncio.run(search_issue_topics("bin", catalog=catalog, timeout=0.01))


def test_catalog_failure_raises_search_error(monkeypatch):
    def broken_catalog():
        raise CatalogError("Topic catalog file not found: /nowhere.json")

    monkeypatch.setattr(topic_search, "get_catalog", broken_catalog)

    with pytest.raises(TopicSearchError) as exc_info:
        asyncio.run(search_issue_topics("bin"))
    assert exc_info.value.query == "bin"


def test_cancelled_search_leaves_no_state(catalog, monkeypatch):
    monkeypatch.setattr(settings, "SEARCH_LATENCY_SECONDS", 0.5)

    async def cancel_then_search():
        task = asyncio.ensure_future(search_issue_topics("bin", catalog=catalog))
        await asyncio.sleep(0.01)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        monkeypatch.setattr(settings, "SEARCH_LATENCY_SECONDS", 0.0)
        return await search_issue_topics("bin", catalog=catalog)

    assert _ids(asyncio.run(cancel_then_search())) == ["wm_004", "wm_001", "wm_003"]
