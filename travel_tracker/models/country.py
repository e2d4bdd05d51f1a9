# travel_tracker/models/country.py

from . import db


class Country(db.Model):
    """Reference row for a country, keyed by its ISO 3166-1 alpha-2 code."""
    __tablename__ = 'countries'

    country_code = db.Column(db.String(2), primary_key=True)
    country = db.Column(db.String(100), nullable=False, index=True)

    def __init__(self, country_code, country):
        self.country_code = country_code
        self.country = country

    def __repr__(self):
        return f'<Country {self.country_code} {self.country}>'


class VisitedCountry(db.Model):
    """Join row recording that a user has visited a country."""
    __tablename__ = 'visited_countries'

    # Composite key: a (user, country) pair is stored at most once
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), primary_key=True)
    country_code = db.Column(db.String(2), db.ForeignKey('countries.country_code'), primary_key=True)

    user = db.relationship('User', back_populates='visits')
    country = db.relationship('Country')

    def __init__(self, user_id, country_code):
        self.user_id = user_id
        self.country_code = country_code

    def __repr__(self):
        return f'<VisitedCountry {self.user_id} {self.country_code}>'
