"""
Error Handlers Module

Provides centralized error handling for the Flask application:
- Custom error pages for HTTP errors
- Database errors rolled back and logged with traceback
- A catch-all for unexpected exceptions outside debug mode
- HTTP error events written to the security log
"""

from flask import render_template, request, current_app
from werkzeug.exceptions import HTTPException

from travel_tracker.extensions import db
from travel_tracker.logging_config import log_security_event
from sqlalchemy.exc import SQLAlchemyError


ERROR_TEMPLATES = {
    400: 'errors/400.html',
    404: 'errors/404.html',
    405: 'errors/405.html',
    500: 'errors/500.html',
}


def log_error_event(error_code, error_message, exception=None):
    """
    Log an HTTP error to the security log.

    Args:
        error_code: HTTP status code
        error_message: Error message
        exception: Original exception object (if any)
    """
    severity = 'ERROR' if error_code >= 500 else 'WARNING'
    if error_code == 404:
        severity = 'INFO'

    details = None
    if exception is not None and current_app.debug:
        details = f"{type(exception).__name__}: {exception}"

    log_security_event(
        event_type=f"HTTP_{error_code}",
        ip_address=request.remote_addr,
        description=error_message,
        severity=severity,
        method=request.method,
        path=request.path,
        details=details,
    )


def create_error_response(error_code, title, message, description=None):
    """
    Render the error page for error_code.

    Returns:
        (body, status) tuple
    """
    template = ERROR_TEMPLATES.get(error_code, 'errors/500.html')

    try:
        return render_template(
            template,
            error_code=error_code,
            title=title,
            message=message,
            description=description
        ), error_code
    except Exception as e:
        # Fallback if template rendering fails
        current_app.logger.error(f"Error rendering error template: {e}", exc_info=True)
        return f"<h1>{error_code} {title}</h1><p>{message}</p>", error_code


# ==================== HTTP Error Handlers ====================

def handle_400(e):
    """Handle 400 Bad Request errors."""
    log_error_event(400, "Bad Request", e)
    return create_error_response(
        400,
        "Bad Request",
        "The request could not be understood by the server.",
        "Please check your input and try again."
    )


def handle_404(e):
    """Handle 404 Not Found errors."""
    log_error_event(404, "Not Found", e)
    return create_error_response(
        404,
        "Page Not Found",
        "The page you are looking for does not exist.",
        "Head back to the map to keep tracking your travels."
    )


def handle_405(e):
    log_error_event(405, "Method Not Allowed", e)
    return create_error_response(
        405,
        "Method Not Allowed",
        "That page can't be used this way.",
        "Use the forms on the map page instead."
    )


def handle_500(e):
    """Handle 500 Internal Server Error."""
    current_app.logger.error(f"Internal Server Error: {e}", exc_info=True)
    log_error_event(500, "Internal Server Error", e)

    # In production, don't expose internal error details
    if current_app.debug:
        message = str(e)
    else:
        message = "An unexpected error occurred on our end."

    return create_error_response(500, "Internal Server Error", message)


# ==================== Database Error Handlers ====================

def handle_database_error(e):
    """Roll back the session and render a generic database error page."""
    db.session.rollback()
    current_app.logger.error(f"Database error: {e}", exc_info=True)
    log_error_event(500, "Database Error", e)

    if current_app.debug:
        message = f"Database error: {e}"
    else:
        message = "A database error occurred. Please try again."

    return create_error_response(500, "Database Error", message)


# ==================== Generic Exception Handler ====================

def handle_generic_exception(e):
    """Catch-all for exceptions no other handler claimed."""
    if isinstance(e, HTTPException):
        # HTTP errors without a dedicated handler keep their default response
        return e

    current_app.logger.error(
        f"Unhandled exception: {type(e).__name__}: {e}",
        exc_info=True
    )
    log_error_event(500, f"Unhandled Exception: {type(e).__name__}", e)

    return create_error_response(
        500,
        "Internal Server Error",
        "An unexpected error occurred."
    )


# ==================== Registration Function ====================

def register_error_handlers(app):
    """
    Register all error handlers with the Flask application.

    Args:
        app: Flask application instance
    """
    app.register_error_handler(400, handle_400)
    app.register_error_handler(404, handle_404)
    app.register_error_handler(405, handle_405)
    app.register_error_handler(500, handle_500)

    app.register_error_handler(SQLAlchemyError, handle_database_error)

    # Only register catch-all outside debug mode to keep the debugger
    if not app.debug:
        app.register_error_handler(Exception, handle_generic_exception)

    app.logger.info("Error handlers registered successfully")
