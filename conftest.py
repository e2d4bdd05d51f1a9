"""
Shared pytest fixtures: an app on in-memory SQLite with the schema created,
a test client and a small set of countries and users.
"""

import pytest
from sqlalchemy import select, func

from config import TestingConfig
from travel_tracker import create_app
from travel_tracker.extensions import db
from travel_tracker.models import Country, User, VisitedCountry


SAMPLE_COUNTRIES = [
    ('ES', 'Spain'),
    ('FR', 'France'),
    ('DE', 'Germany'),
    ('NE', 'Niger'),
    ('NG', 'Nigeria'),
    ('GB', 'United Kingdom'),
    ('US', 'United States'),
    ('UM', 'United States Minor Outlying Islands'),
    ('AE', 'United Arab Emirates'),
]


def make_config(tmp_path, **overrides):
    """TestingConfig subclass that logs into tmp_path."""
    attrs = {'LOG_DIR': str(tmp_path / 'logs')}
    attrs.update(overrides)
    return type('TmpTestingConfig', (TestingConfig,), attrs)


@pytest.fixture
def app(tmp_path):
    app = create_app(make_config(tmp_path))

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def countries(app):
    for code, name in SAMPLE_COUNTRIES:
        db.session.add(Country(country_code=code, country=name))
    db.session.commit()
    return dict(SAMPLE_COUNTRIES)


@pytest.fixture
def users(app):
    angela = User(name='Angela', color='teal')
    jack = User(name='Jack', color='powderblue')
    db.session.add_all([angela, jack])
    db.session.commit()
    return {'angela': angela.id, 'jack': jack.id}


def visited_rows(user_id=None):
    """Return (user_id, country_code) pairs currently stored."""
    query = select(VisitedCountry.user_id, VisitedCountry.country_code)
    if user_id is not None:
        query = query.where(VisitedCountry.user_id == user_id)
    return [tuple(row) for row in db.session.execute(query.order_by(VisitedCountry.country_code))]


def user_count():
    return db.session.scalar(select(func.count()).select_from(User))
