"""ASGI entrypoint for the session analytics API."""

from session_analytics.api.app import create_app
from session_analytics.containers import build_container

app = create_app(build_container())
