"""Gunicorn config for the Appointment Analytics API.

Run with: gunicorn appointments.main:app -c gunicorn.conf.py
"""
import os

# Bind to the platform's PORT or default 8000
bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# Uvicorn async workers. Each worker holds its own DataStore, so an upload
# only replaces the data set of the worker that received it; keep 1 worker
# unless APPOINTMENTS_DATA_FILE is set for every worker.
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.environ.get("WEB_CONCURRENCY", "1"))

# Large Excel uploads are parsed in-request
timeout = 120

graceful_timeout = 30

# Keep-alive must exceed the proxy keep-alive (default 60s)
keepalive = 65

# Logging
accesslog = "-"
errorlog = "-"
loglevel = os.environ.get("LOG_LEVEL", "info")

# Route the package loggers through gunicorn's error stream
logconfig_dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {"format": "%(asctime)s [%(process)d] [%(levelname)s] %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "plain", "stream": "ext://sys.stdout"},
    },
    "loggers": {
        "appointments": {"handlers": ["console"], "level": loglevel.upper(), "propagate": False},
    },
}
