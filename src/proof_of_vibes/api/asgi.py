"""ASGI entrypoint for the collectibles API."""

from proof_of_vibes.api.app import create_app
from proof_of_vibes.containers import build_container

app = create_app(build_container())
