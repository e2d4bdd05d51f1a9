"""
Tests for error handling: custom error pages, database errors and the
security log integration.
"""

from sqlalchemy.exc import OperationalError

from conftest import make_config
from travel_tracker import create_app, check_database_connection


def test_error_handlers_registered(app):
    handlers = app.error_handler_spec[None]

    for code in (400, 404, 405, 500):
        assert code in handlers


def test_404_error_response(client):
    response = client.get('/nonexistent-page-12345')

    assert response.status_code == 404
    assert b'Page Not Found' in response.data
    assert b'Back to the map' in response.data


def test_405_on_get_add(client):
    response = client.get('/add')

    assert response.status_code == 405
    assert b'Method Not Allowed' in response.data


def test_500_error_no_debug_info(app, client):
    @app.route('/test-500-error')
    def trigger_500():
        raise Exception("Test exception - this should not be exposed to users")

    response = client.get('/test-500-error')

    assert response.status_code == 500
    text = response.data.decode('utf-8').lower()
    assert 'test exception' not in text
    assert 'traceback' not in text
    assert 'an unexpected error occurred.' in text


def test_database_error_page(app, client, tmp_path):
    @app.route('/test-db-error')
    def trigger_db_error():
        raise OperationalError('SELECT 1', {}, Exception('database is gone'))

    response = client.get('/test-db-error')

    assert response.status_code == 500
    assert b'A database error occurred. Please try again.' in response.data
    assert b'database is gone' not in response.data
    assert 'database is gone' in (tmp_path / 'logs' / 'error.log').read_text()


def test_http_errors_written_to_security_log(client, tmp_path):
    client.get('/missing-page')
    client.get('/add')

    security_log = (tmp_path / 'logs' / 'security.log').read_text()
    assert 'EVENT:HTTP_404' in security_log
    assert 'PATH:/missing-page' in security_log
    assert 'EVENT:HTTP_405' in security_log


def test_startup_survives_unreachable_database(tmp_path):
    config_class = make_config(
        tmp_path,
        SQLALCHEMY_DATABASE_URI=f'sqlite:///{tmp_path}/missing-dir/world.db',
    )

    app = create_app(config_class)

    assert app is not None
    assert check_database_connection(app) is False
    assert 'Database connection error' in (tmp_path / 'logs' / 'error.log').read_text()


def test_startup_check_logs_success(app, tmp_path):
    assert check_database_connection(app) is True
    assert 'Connected to database' in (tmp_path / 'logs' / 'app.log').read_text()
