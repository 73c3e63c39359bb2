"""ASGI entrypoint for the pawcare breed API."""

from pawcare.api.app import create_app
from pawcare.containers import build_container

app = create_app(build_container())
