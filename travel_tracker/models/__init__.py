# travel_tracker/models/__init__.py

from travel_tracker.extensions import db

from .user import User
from .country import Country, VisitedCountry
