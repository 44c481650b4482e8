"""Curatorator: similar-artist theme reports from the Artsy API."""

__version__ = "0.1.0"
