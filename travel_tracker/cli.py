# travel_tracker/cli.py
"""
Flask CLI commands for reference data and quick inspection.
"""

import csv

import click
from flask import current_app
from sqlalchemy import select, func

from travel_tracker.extensions import db
from travel_tracker.models import Country, User, VisitedCountry


def read_countries_csv(path):
    """
    Read (country_code, country) pairs from a CSV with those two headers.

    Rows with a blank code or name are skipped; codes are upper-cased.
    """
    with open(path, newline='', encoding='utf-8') as handle:
        for row in csv.DictReader(handle):
            code = (row.get('country_code') or '').strip().upper()
            name = (row.get('country') or '').strip()
            if code and name:
                yield code, name


def register_cli_commands(app):
    """Register CLI commands with the Flask app."""

    @app.cli.command('seed-countries')
    @click.argument('csv_path', required=False, type=click.Path(exists=True, dir_okay=False))
    def seed_countries_command(csv_path):
        """Load country reference data from a CSV (skips existing codes)."""
        csv_path = csv_path or current_app.config['COUNTRIES_CSV']

        existing = set(db.session.scalars(select(Country.country_code)))
        added = 0
        for code, name in read_countries_csv(csv_path):
            if code in existing:
                continue
            db.session.add(Country(country_code=code, country=name))
            existing.add(code)
            added += 1

        db.session.commit()
        click.echo(f'Added {added} countries ({len(existing)} total).')

    @app.cli.command('list-users')
    def list_users_command():
        """Show every user with their colour and number of visited countries."""
        rows = db.session.execute(
            select(User.id, User.name, User.color, func.count(VisitedCountry.country_code))
            .outerjoin(VisitedCountry, VisitedCountry.user_id == User.id)
            .group_by(User.id, User.name, User.color)
            .order_by(User.id)
        ).all()

        if not rows:
            click.echo('No users yet.')
            return

        for user_id, name, color, visits in rows:
            click.echo(f'{user_id}\t{name}\t{color}\t{visits}')
