# travel_tracker/models/user.py

from . import db


class User(db.Model):
    """A family member whose visited countries are tracked."""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(15), nullable=False)
    # Fill colour for this member's countries on the map
    color = db.Column(db.String(15), nullable=False)

    visits = db.relationship('VisitedCountry', back_populates='user', lazy='dynamic')

    def __init__(self, name, color):
        self.name = name
        self.color = color

    def __repr__(self):
        return f'<User {self.id} {self.name}>'
