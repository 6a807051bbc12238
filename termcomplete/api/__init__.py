"""FastAPI front end for prefix suggestions."""

from termcomplete.api.app import create_app

__all__ = ["create_app"]
