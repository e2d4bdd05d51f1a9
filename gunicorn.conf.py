# Gunicorn configuration file for the travel tracker
# https://docs.gunicorn.org/en/stable/settings.html
# Run with: gunicorn -c gunicorn.conf.py wsgi:app

import multiprocessing
import os

# Server socket
bind = f"0.0.0.0:{os.environ.get('PORT', '3000')}"
backlog = 2048

# Worker processes
workers = int(os.environ.get('WEB_CONCURRENCY', multiprocessing.cpu_count() * 2 + 1))
worker_class = "sync"
timeout = 30
keepalive = 5
max_requests = 1000  # Restart workers after this many requests
max_requests_jitter = 50

# Logging (stdout/stderr, collected by the hosting platform)
errorlog = "-"
accesslog = "-"
loglevel = "info"
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'

# Process naming
proc_name = "travel-tracker"

# Security
limit_request_line = 4094
limit_request_fields = 100
limit_request_field_size = 8190
