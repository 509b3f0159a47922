import pytest
from datetime import datetime, timedelta, timezone

from core.session import SessionStore
from db.schemas.projects import Creator, Project
from db.session import load_catalog

NOW = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)


def build_project(id, **overrides):
    fields = dict(
        id=str(id),
        title=f'Project {id}',
        slug=f'project-{id}',
        description='test',
        category='community',
        creator=Creator(id='c1', displayName='Test Creator'),
        fundingGoal=100000,
        currentAmount=0,
        donorCount=0,
        status='active',
        startDate=NOW - timedelta(days=1),
        endDate=NOW + timedelta(days=30),
        createdAt=NOW - timedelta(days=2),
        updatedAt=NOW,
    )
    fields.update(overrides)
    return Project(**fields)


@pytest.fixture
def catalog():
    return load_catalog(NOW)


@pytest.fixture
def sessions():
    store = SessionStore()
    store.open()
    yield store
    store.close()


@pytest.fixture
def make_project():
    return build_project
