"""ASGI entrypoint for the showdesk API."""

from showdesk.api.app import create_app
from showdesk.containers import build_container

app = create_app(build_container())
