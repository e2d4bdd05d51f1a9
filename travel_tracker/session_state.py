"""
Session State Module

Keeps the "current user" selector in Flask's signed session cookie so each
browser picks its own family member:
- Selecting a user explicitly (user tabs, new member form)
- Resolving the selection against the users that actually exist
- Falling back to the first user when the selection is missing or stale
"""

from datetime import datetime
from flask import session, current_app


CURRENT_USER_KEY = 'current_user_id'
SELECTED_AT_KEY = '_selected_at'


def select_user(user_id):
    """
    Make user_id the current user for this browser session.

    Args:
        user_id: Primary key of an existing user
    """
    session[CURRENT_USER_KEY] = int(user_id)
    session[SELECTED_AT_KEY] = datetime.utcnow().isoformat()
    session.permanent = True


def get_selected_user_id():
    """Return the stored user id, or None when nothing has been selected."""
    return session.get(CURRENT_USER_KEY)


def clear_selection():
    session.pop(CURRENT_USER_KEY, None)
    session.pop(SELECTED_AT_KEY, None)


def resolve_current_user(users):
    """
    Pick the current user out of a list of users.

    When the session has no selection, or points at a user that no longer
    exists, the first user in the list is selected instead.

    Args:
        users: Users ordered by id

    Returns:
        User or None: None only when there are no users at all
    """
    if not users:
        if get_selected_user_id() is not None:
            clear_selection()
        return None

    selected_id = get_selected_user_id()
    if selected_id is not None:
        for user in users:
            if user.id == selected_id:
                return user
        current_app.logger.warning(
            f"Session selected unknown user {selected_id}, falling back to user {users[0].id}"
        )

    select_user(users[0].id)
    return users[0]
