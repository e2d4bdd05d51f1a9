"""
Tests for configuration helpers: database URL handling and engine options.
"""

import os

from config import (
    basedir,
    build_engine_options,
    config,
    normalize_database_url,
    ProductionConfig,
    TestingConfig,
)


def test_missing_database_url_uses_local_sqlite():
    assert normalize_database_url(None) == 'sqlite:///' + os.path.join(basedir, 'travel_tracker.db')
    assert normalize_database_url('') == 'sqlite:///' + os.path.join(basedir, 'travel_tracker.db')


def test_postgres_scheme_is_rewritten():
    url = normalize_database_url('postgres://u:p@db.example.com:5432/world')
    assert url == 'postgresql://u:p@db.example.com:5432/world'


def test_postgresql_url_is_untouched():
    url = 'postgresql+psycopg2://u:p@localhost/world'
    assert normalize_database_url(url) == url


def test_engine_options_ssl_without_verification():
    options = build_engine_options('postgresql://localhost/world', use_ssl=True, ssl_no_verify=True)
    assert options['connect_args'] == {'sslmode': 'require'}
    assert options['pool_pre_ping'] is True


def test_engine_options_ssl_with_verification():
    options = build_engine_options('postgresql://localhost/world', use_ssl=True, ssl_no_verify=False)
    assert options['connect_args'] == {'sslmode': 'verify-full'}


def test_engine_options_ssl_disabled():
    options = build_engine_options('postgresql://localhost/world', use_ssl=False)
    assert options['connect_args'] == {'sslmode': 'disable'}


def test_engine_options_sqlite_has_no_ssl():
    options = build_engine_options('sqlite:///world.db')
    assert 'connect_args' not in options


def test_config_selection():
    assert config['testing'] is TestingConfig
    assert config['production'] is ProductionConfig
    assert TestingConfig.WTF_CSRF_ENABLED is False
    assert ProductionConfig.DEBUG is False
    assert ProductionConfig.PROPAGATE_EXCEPTIONS is False
