"""
Visited Country Service - Resolves country names and records visits.

Adding a country never raises: every attempt ends in an AddCountryResult
whose outcome the route turns into a redirect or an error message.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError

from travel_tracker.extensions import db
from travel_tracker.models import Country, VisitedCountry
from travel_tracker.logging_config import log_visit

logger = logging.getLogger(__name__)

COUNTRY_NOT_FOUND_MESSAGE = "Country name does not exist, try again."
ALREADY_ADDED_MESSAGE = "You've already added this country."
NO_USER_MESSAGE = "Add a family member before adding countries."


class AddOutcome(enum.Enum):
    INSERTED = 'inserted'
    NOT_FOUND = 'not_found'
    ALREADY_ADDED = 'already_added'
    NO_USER = 'no_user'
    FAILED = 'failed'


@dataclass(frozen=True)
class AddCountryResult:
    outcome: AddOutcome
    country_code: Optional[str] = None

    @property
    def ok(self):
        return self.outcome is AddOutcome.INSERTED

    @property
    def message(self):
        """User-facing message for this outcome, None on success."""
        if self.outcome is AddOutcome.ALREADY_ADDED:
            return ALREADY_ADDED_MESSAGE
        if self.outcome is AddOutcome.NO_USER:
            return NO_USER_MESSAGE
        if self.outcome in (AddOutcome.NOT_FOUND, AddOutcome.FAILED):
            # Failures keep the lookup wording; the real cause is in the error log
            return COUNTRY_NOT_FOUND_MESSAGE
        return None


class VisitedCountryService:
    """Service for country lookups and visited-country rows."""

    @staticmethod
    def get_visited_codes(user_id):
        """Return the country codes the user has visited."""
        if user_id is None:
            return []
        return list(db.session.scalars(
            select(VisitedCountry.country_code).where(VisitedCountry.user_id == user_id)
        ))

    @staticmethod
    def find_country(name):
        """
        Resolve a typed country name to a Country row.

        Tries a case-insensitive exact match first, then a case-insensitive
        substring match. When several rows contain the name, the first by
        country name wins.

        Returns:
            Country or None
        """
        if name is None:
            return None
        needle = name.strip().lower()
        if not needle:
            return None

        exact = db.session.scalars(
            select(Country).where(func.lower(Country.country) == needle).limit(1)
        ).first()
        if exact is not None:
            return exact

        return db.session.scalars(
            select(Country)
            .where(func.lower(Country.country).contains(needle, autoescape=True))
            .order_by(Country.country, Country.country_code)
            .limit(1)
        ).first()

    @staticmethod
    def has_visited(user_id, country_code):
        row = db.session.scalar(
            select(VisitedCountry).where(
                VisitedCountry.user_id == user_id,
                VisitedCountry.country_code == country_code
            )
        )
        return row is not None

    @staticmethod
    def add_visit(user_id, country_code):
        """Insert the (user, country) pair and commit."""
        visit = VisitedCountry(user_id=user_id, country_code=country_code)
        db.session.add(visit)
        db.session.commit()
        return visit

    @staticmethod
    def add_country_for_user(user, name):
        """
        Look up a country by name and record it as visited by the user.

        Args:
            user: User the visit is recorded for (None when no users exist)
            name: Free-text country name as typed

        Returns:
            AddCountryResult
        """
        if user is None:
            return AddCountryResult(AddOutcome.NO_USER)

        code = None
        try:
            country = VisitedCountryService.find_country(name)
            if country is None:
                logger.info(f"No country matches {name!r} (user {user.id})")
                return AddCountryResult(AddOutcome.NOT_FOUND)

            code = country.country_code
            if VisitedCountryService.has_visited(user.id, code):
                return AddCountryResult(AddOutcome.ALREADY_ADDED, code)

            VisitedCountryService.add_visit(user.id, code)

        except IntegrityError as e:
            db.session.rollback()
            # Only a committed identical row means the insert lost a race
            if code is not None and db.session.get(VisitedCountry, (user.id, code)) is not None:
                logger.warning(f"Duplicate visit insert for user {user.id} and {code}")
                return AddCountryResult(AddOutcome.ALREADY_ADDED, code)
            logger.error(f"Integrity error adding {code} for user {user.id}: {e}", exc_info=True)
            return AddCountryResult(AddOutcome.FAILED)

        except Exception as e:
            db.session.rollback()
            logger.error(f"Error adding country {name!r} for user {user.id}: {e}", exc_info=True)
            return AddCountryResult(AddOutcome.FAILED)

        log_visit(user.id, code, country.country)
        return AddCountryResult(AddOutcome.INSERTED, code)
