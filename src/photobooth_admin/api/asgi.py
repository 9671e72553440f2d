"""ASGI entrypoint for the photo booth admin API."""

from photobooth_admin.api.app import create_app
from photobooth_admin.containers import build_container

app = create_app(build_container())
