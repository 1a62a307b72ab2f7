"""ASGI entrypoint for the progress tracker API."""

from progress_tracker.api.app import create_app
from progress_tracker.containers import build_container

app = create_app(build_container())
