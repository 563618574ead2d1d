"""Gunicorn config for container deployment."""
import os

bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# One worker: each worker fetches and holds its own copy of the tender Table,
# and refreshes are coordinated per process. Tune via WEB_CONCURRENCY env var.
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.environ.get("WEB_CONCURRENCY", "1"))

# Startup fetch of the full feed can take a while on a cold proxy
timeout = 120

graceful_timeout = 30
keepalive = 65

# Logging
accesslog = "-"
errorlog = "-"
loglevel = "info"
