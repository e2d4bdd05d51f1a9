# travel_tracker/main/__init__.py
from flask import Blueprint

# Create the main blueprint instance
bp = Blueprint('main', __name__)


def pluralize(count, singular='country', plural='countries'):
    """Pick the singular or plural noun for a count."""
    return singular if count == 1 else plural


bp.add_app_template_filter(pluralize)

# Import routes at the end to avoid circular dependencies
from travel_tracker.main import routes  # noqa
