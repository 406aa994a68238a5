"""ASGI entrypoint for the ChompQuest API."""

from chompquest.api.app import create_app
from chompquest.containers import build_container

app = create_app(build_container())
