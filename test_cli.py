"""
Tests for the Flask CLI commands.
"""

from sqlalchemy import select, func

from travel_tracker.cli import read_countries_csv
from travel_tracker.extensions import db
from travel_tracker.models import Country, VisitedCountry


def write_csv(path, rows):
    path.write_text('country_code,country\n' + ''.join(f'{code},{name}\n' for code, name in rows))
    return path


def country_count():
    return db.session.scalar(select(func.count()).select_from(Country))


def test_read_countries_csv_skips_blank_rows(tmp_path):
    path = write_csv(tmp_path / 'c.csv', [('es', ' Spain '), ('', 'Nowhere'), ('FR', '')])

    assert list(read_countries_csv(path)) == [('ES', 'Spain')]


def test_seed_countries_from_file(app, tmp_path):
    path = write_csv(tmp_path / 'c.csv', [('ES', 'Spain'), ('FR', 'France')])
    runner = app.test_cli_runner()

    result = runner.invoke(args=['seed-countries', str(path)])

    assert result.exit_code == 0
    assert 'Added 2 countries (2 total).' in result.output
    assert country_count() == 2


def test_seed_countries_skips_existing(app, tmp_path):
    db.session.add(Country(country_code='ES', country='Spain'))
    db.session.commit()
    path = write_csv(tmp_path / 'c.csv', [('ES', 'Spain'), ('DE', 'Germany')])

    result = app.test_cli_runner().invoke(args=['seed-countries', str(path)])

    assert 'Added 1 countries (2 total).' in result.output
    assert country_count() == 2


def test_seed_countries_default_file(app):
    result = app.test_cli_runner().invoke(args=['seed-countries'])

    assert result.exit_code == 0
    assert db.session.get(Country, 'ES').country == 'Spain'
    assert db.session.get(Country, 'US').country == 'United States'


def test_list_users(app, countries, users):
    db.session.add(VisitedCountry(users['jack'], 'ES'))
    db.session.add(VisitedCountry(users['jack'], 'FR'))
    db.session.commit()

    result = app.test_cli_runner().invoke(args=['list-users'])

    assert result.exit_code == 0
    assert f"{users['angela']}\tAngela\tteal\t0" in result.output
    assert f"{users['jack']}\tJack\tpowderblue\t2" in result.output


def test_list_users_empty(app):
    result = app.test_cli_runner().invoke(args=['list-users'])

    assert 'No users yet.' in result.output
