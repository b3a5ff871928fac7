"""
Shared fixtures: the bundled catalog, small hand-built catalogs and an
API client with fresh process-wide state.
"""

import json

import pytest
from fastapi.testclient import TestClient

from residents.core.settings import DEFAULT_CATALOG_PATH
from residents.models.topic import IssueTopic
from residents.services import analytics_service, topic_catalog
from residents.services.topic_catalog import TopicCatalog


def make_topic(topic_id, title, keywords=(), department="Roads & Transport",
               head="John Mitchell", email="roads@citycouncil.gov", category="roads"):
    return IssueTopic(
        id=topic_id,
        title=title,
        keywords=list(keywords),
        department=department,
        department_head=head,
        department_email=email,
        category=category,
        description=f"Report {title.lower()}",
    )


def write_catalog(path, records):
    with open(path, "w", encoding="utf-8") as f:
        json.dump({"version": "test", "topics": records}, f)
    return path


@pytest.fixture
def catalog():
    return TopicCatalog.from_file(DEFAULT_CATALOG_PATH)


@pytest.fixture
def small_topics():
    return [
        make_topic("t1", "Pothole on road", ["pothole", "road", "hole"]),
        make_topic("t2", "Damaged pavement", ["pavement", "footpath"]),
        make_topic("t3", "Street light not working", ["lamp", "broken light"],
                   department="Street Lighting", head="David Clarke",
                   email="lighting@citycouncil.gov", category="lighting"),
        make_topic("t4", "Graffiti", ["graffiti", "spray paint"],
                   department="Community Safety", head="Michael Brown",
                   email="safety@citycouncil.gov", category="graffiti"),
    ]


@pytest.fixture
def small_catalog(small_topics):
    return TopicCatalog(small_topics)


@pytest.fixture(autouse=True)
def reset_globals(monkeypatch):
    """Each test starts without a loaded catalog or recorded events."""
    monkeypatch.setattr(topic_catalog, "_catalog", None)
    monkeypatch.setattr(analytics_service, "_analytics", None)
    yield


@pytest.fixture
def client():
    from residents.main import app
    with TestClient(app) as test_client:
        yield test_client
