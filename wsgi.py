"""WSGI entrypoint for Gunicorn.

Usage:
  gunicorn -w 1 --threads 8 -b 0.0.0.0:8080 wsgi:app

Tenant sessions live in process memory, so run a single worker process.
"""

from prizedraw import create_app

app = create_app()
