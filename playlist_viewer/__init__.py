"""Spotify playlist viewer: a thin FastAPI proxy over the Spotify Web API."""

__version__ = "0.1.0"
