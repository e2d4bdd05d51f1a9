"""
User Service - Handles family member lookups and creation.
"""

import logging
from sqlalchemy import select
from travel_tracker.extensions import db
from travel_tracker.models import User

logger = logging.getLogger(__name__)


class UserService:
    """Service for reading and creating users."""

    @staticmethod
    def get_all_users():
        """Return every user, oldest first."""
        return list(db.session.scalars(select(User).order_by(User.id)))

    @staticmethod
    def get_user(user_id):
        if user_id is None:
            return None
        return db.session.get(User, user_id)

    @staticmethod
    def create_user(name, color):
        """
        Insert a new user and commit.

        Returns:
            User: the new row, with its generated id
        """
        user = User(name=name.strip(), color=color.strip())
        db.session.add(user)
        db.session.commit()
        logger.info(f"Created user {user.id} ({user.name}, {user.color})")
        return user
