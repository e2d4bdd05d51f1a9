# travel_tracker/services/__init__.py
"""
Service layer for the travel tracker.

Services encapsulate the database queries so route handlers only deal with
outcomes and models.
"""

from .user_service import UserService
from .visited_country_service import VisitedCountryService, AddCountryResult, AddOutcome

__all__ = [
    'UserService',
    'VisitedCountryService',
    'AddCountryResult',
    'AddOutcome',
]
