"""Concrete adapters for the interfaces in ``curatorator.interfaces``."""
