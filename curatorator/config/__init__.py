"""Configuration module - exports Settings and load_config."""

from curatorator.config.loader import load_config
from curatorator.config.settings import Settings

__all__ = ["Settings", "load_config"]
