"""WSGI entry point for gunicorn.

Usage:
    gunicorn fcm_operation.wsgi:app --bind 0.0.0.0:8000
"""
from fcm_operation.app import create_app

app = create_app()
