"""Security response headers, driven by SECURITY_HEADERS and CONTENT_SECURITY_POLICY."""

from flask import current_app


def build_csp_header(csp_config):
    """
    Build a Content-Security-Policy value from a {directive: [sources]} dict.

    Directives with no sources are emitted bare.
    """
    return '; '.join(
        f"{directive} {' '.join(sources)}" if sources else directive
        for directive, sources in csp_config.items()
    )


def add_security_headers(response):
    """Copy the configured security headers and CSP onto a response."""
    for header, value in current_app.config.get('SECURITY_HEADERS', {}).items():
        response.headers.setdefault(header, value)

    csp_config = current_app.config.get('CONTENT_SECURITY_POLICY', {})
    if csp_config:
        response.headers['Content-Security-Policy'] = build_csp_header(csp_config)

    return response


def register_security_headers(app):
    app.after_request(add_security_headers)
