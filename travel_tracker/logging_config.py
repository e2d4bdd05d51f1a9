"""Logging configuration for the travel tracker application."""

import os
import logging
from logging.handlers import RotatingFileHandler, TimedRotatingFileHandler


class LogConfig:
    LOG_DIR = 'logs'

    APP_LOG_FILE = 'app.log'
    ERROR_LOG_FILE = 'error.log'
    VISIT_LOG_FILE = 'visits.log'
    SECURITY_LOG_FILE = 'security.log'

    LOG_LEVELS = {
        'development': logging.DEBUG,
        'testing': logging.INFO,
        'production': logging.INFO,
    }

    MAX_BYTES = 10 * 1024 * 1024
    BACKUP_COUNT = 10

    DETAILED_FORMAT = (
        '%(asctime)s - %(name)s - %(levelname)s - '
        '[%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s'
    )
    SIMPLE_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
    VISIT_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

    @classmethod
    def get_log_level(cls, env='development'):
        return cls.LOG_LEVELS.get(env, logging.INFO)


def setup_logging(app):
    env = app.config.get('ENV', 'development')
    log_level = LogConfig.get_log_level(env)

    log_dir = app.config.get('LOG_DIR') or os.path.join(app.root_path, '..', LogConfig.LOG_DIR)
    os.makedirs(log_dir, exist_ok=True)

    # app.logger is the 'travel_tracker' logger, so service module loggers propagate to it
    app.logger.handlers.clear()
    app.logger.setLevel(log_level)

    handlers = []

    if env == 'development':
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(logging.Formatter(LogConfig.SIMPLE_FORMAT))
        handlers.append(console_handler)

    app_handler = RotatingFileHandler(
        os.path.join(log_dir, LogConfig.APP_LOG_FILE),
        maxBytes=LogConfig.MAX_BYTES,
        backupCount=LogConfig.BACKUP_COUNT
    )
    app_handler.setLevel(log_level)
    app_handler.setFormatter(logging.Formatter(LogConfig.DETAILED_FORMAT))
    handlers.append(app_handler)

    error_handler = RotatingFileHandler(
        os.path.join(log_dir, LogConfig.ERROR_LOG_FILE),
        maxBytes=LogConfig.MAX_BYTES,
        backupCount=LogConfig.BACKUP_COUNT
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(logging.Formatter(LogConfig.DETAILED_FORMAT))
    handlers.append(error_handler)

    for handler in handlers:
        app.logger.addHandler(handler)

    visit_handler = TimedRotatingFileHandler(
        os.path.join(log_dir, LogConfig.VISIT_LOG_FILE),
        when='midnight',
        interval=1,
        backupCount=90
    )
    visit_handler.setLevel(logging.INFO)
    visit_handler.setFormatter(logging.Formatter(LogConfig.VISIT_FORMAT))

    visit_logger = logging.getLogger('visits')
    visit_logger.setLevel(logging.INFO)
    visit_logger.handlers.clear()
    visit_logger.addHandler(visit_handler)
    visit_logger.propagate = False

    security_handler = TimedRotatingFileHandler(
        os.path.join(log_dir, LogConfig.SECURITY_LOG_FILE),
        when='midnight',
        interval=1,
        backupCount=365
    )
    security_handler.setLevel(logging.INFO)
    security_handler.setFormatter(logging.Formatter(LogConfig.DETAILED_FORMAT))

    security_logger = logging.getLogger('security')
    security_logger.setLevel(logging.INFO)
    security_logger.handlers.clear()
    security_logger.addHandler(security_handler)
    security_logger.propagate = False

    app.logger.info('=' * 80)
    app.logger.info('Travel Tracker Application Starting')
    app.logger.info(f'Environment: {env}')
    app.logger.info(f'Log Level: {logging.getLevelName(log_level)}')
    app.logger.info(f'Log Directory: {log_dir}')
    app.logger.info('=' * 80)


def get_visit_logger():
    return logging.getLogger('visits')


def get_security_logger():
    return logging.getLogger('security')


def log_visit(user_id, country_code, country_name=''):
    logger = get_visit_logger()

    log_message = f"USER:{user_id} | COUNTRY:{country_code}"
    if country_name:
        log_message += f" | NAME:{country_name}"

    logger.info(log_message)


def log_security_event(event_type, ip_address=None, description='', severity='WARNING', **kwargs):
    logger = get_security_logger()

    log_message = f"EVENT:{event_type}"
    if ip_address:
        log_message += f" | IP:{ip_address}"
    if description:
        log_message += f" | DESC:{description}"
    metadata = ' | '.join([f'{k.upper()}:{v}' for k, v in kwargs.items() if v is not None])
    if metadata:
        log_message += f" | {metadata}"

    log_func = getattr(logger, severity.lower(), logger.warning)
    log_func(log_message)
