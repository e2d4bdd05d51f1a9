import os
from dotenv import load_dotenv

basedir = os.path.abspath(os.path.dirname(__file__))
# Use override=True to ensure .env values override any system environment variables
load_dotenv(os.path.join(basedir, '.env'), override=True)


def env_flag(name, default='false'):
    """Read a boolean environment variable ('true'/'false')."""
    return os.environ.get(name, default).lower() == 'true'


def normalize_database_url(url):
    """Return a SQLAlchemy URL for DATABASE_URL, or the local SQLite file when unset."""
    if not url:
        return 'sqlite:///' + os.path.join(basedir, 'travel_tracker.db')
    # Hosted Postgres providers still hand out the scheme SQLAlchemy dropped
    if url.startswith('postgres://'):
        url = url.replace('postgres://', 'postgresql://', 1)
    return url


def build_engine_options(database_uri, use_ssl=True, ssl_no_verify=True):
    """
    Build SQLALCHEMY_ENGINE_OPTIONS for the given database.

    TLS settings only apply to PostgreSQL; with ssl_no_verify the connection is
    encrypted but the server certificate is not checked.
    """
    options = {
        'pool_size': 5,            # Number of persistent connections to maintain
        'max_overflow': 5,         # Additional connections allowed when pool is full
        'pool_timeout': 30,        # Seconds to wait for a connection before error
        'pool_recycle': 1800,      # Recycle connections after 30 minutes
        'pool_pre_ping': True,     # Check connection health before use
    }

    if database_uri.startswith('postgresql'):
        if not use_ssl:
            sslmode = 'disable'
        elif ssl_no_verify:
            sslmode = 'require'
        else:
            sslmode = 'verify-full'
        options['connect_args'] = {'sslmode': sslmode}

    return options


class Config:
    ENV = 'development'
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'

    PORT = int(os.environ.get('PORT', 3000))

    WTF_CSRF_ENABLED = True
    WTF_CSRF_TIME_LIMIT = 3600
    WTF_CSRF_SSL_STRICT = False

    # The current-user selector lives in this cookie
    SESSION_COOKIE_SECURE = env_flag('SESSION_COOKIE_SECURE')
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    PERMANENT_SESSION_LIFETIME = 60 * 60 * 24 * 30  # 30 days

    SECURITY_HEADERS = {
        'X-Content-Type-Options': 'nosniff',
        'X-Frame-Options': 'SAMEORIGIN',
        'Referrer-Policy': 'strict-origin-when-cross-origin',
        'Permissions-Policy': 'geolocation=(), microphone=(), camera=(), payment=()',
        'Cross-Origin-Opener-Policy': 'same-origin',
        'Cross-Origin-Resource-Policy': 'same-origin',
    }

    # 'unsafe-inline' is needed for the map colouring script in index.html
    CONTENT_SECURITY_POLICY = {
        'default-src': ["'self'"],
        'script-src': ["'self'", "'unsafe-inline'"],
        'style-src': [
            "'self'",
            "'unsafe-inline'",
            "https://fonts.googleapis.com",
        ],
        'font-src': ["'self'", "https://fonts.gstatic.com"],
        'img-src': ["'self'", "data:"],
        'object-src': ["'none'"],
        'base-uri': ["'self'"],
        'form-action': ["'self'"],
        'frame-ancestors': ["'none'"],
    }

    SQLALCHEMY_DATABASE_URI = normalize_database_url(os.environ.get('DATABASE_URL'))
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    DATABASE_SSL = env_flag('DATABASE_SSL', 'true')
    DATABASE_SSL_NO_VERIFY = env_flag('DATABASE_SSL_NO_VERIFY', 'true')
    SQLALCHEMY_ENGINE_OPTIONS = build_engine_options(
        SQLALCHEMY_DATABASE_URI, DATABASE_SSL, DATABASE_SSL_NO_VERIFY
    )

    # Run a SELECT 1 when the app is created and log the outcome
    DATABASE_CHECK_ON_STARTUP = True

    LOG_DIR = os.environ.get('LOG_DIR') or os.path.join(basedir, 'logs')

    COUNTRIES_CSV = os.path.join(basedir, 'data', 'countries.csv')

    # Error Handling Configuration
    PROPAGATE_EXCEPTIONS = None  # Let Flask decide based on DEBUG
    TRAP_HTTP_EXCEPTIONS = False
    TRAP_BAD_REQUEST_ERRORS = None


class DevelopmentConfig(Config):
    """Development environment configuration."""
    ENV = 'development'
    DEBUG = True
    TESTING = False

    SESSION_COOKIE_SECURE = False

    PROPAGATE_EXCEPTIONS = False  # Use Flask's error handlers
    TRAP_BAD_REQUEST_ERRORS = True


class ProductionConfig(Config):
    """Production environment configuration."""
    ENV = 'production'
    DEBUG = False
    TESTING = False

    SESSION_COOKIE_SECURE = env_flag('SESSION_COOKIE_SECURE', 'true')

    WTF_CSRF_SSL_STRICT = True

    # Production: Never expose error details
    PROPAGATE_EXCEPTIONS = False
    TRAP_HTTP_EXCEPTIONS = False
    TRAP_BAD_REQUEST_ERRORS = False


class TestingConfig(Config):
    """Testing environment configuration."""
    ENV = 'testing'
    TESTING = True
    DEBUG = False

    SECRET_KEY = 'testing-secret-key'

    # Testing: Use in-memory database
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}

    # Testing: Disable CSRF for easier testing
    WTF_CSRF_ENABLED = False

    # Testing: Disable security headers that might interfere with tests
    SECURITY_HEADERS = {}
    CONTENT_SECURITY_POLICY = {}


# Configuration dictionary for easy selection
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
