"""ASGI entrypoint for the photo catalog API."""

from photo_catalog.api.app import create_app
from photo_catalog.containers import build_container

app = create_app(build_container())
