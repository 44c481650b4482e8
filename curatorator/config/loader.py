"""YAML configuration loader with environment variable overrides.

# ─── CONFIGURATION HIERARCHY ──────────────────────────────────────────
#
#   1. config/config.yaml  - report defaults checked into the repo
#                            (target artist, thresholds, page sizes)
#   2. .env file           - local overrides (not committed)
#   3. Environment vars    - e.g. ARTSY_XAPP_TOKEN
#
# load_config() reads the YAML file, then deep-merges the Settings-derived
# values on top, so the API section always reflects the environment.
# ──────────────────────────────────────────────────────────────────────
"""

from pathlib import Path

import yaml

from curatorator.config.settings import Settings
from curatorator.utils.errors import ConfigurationError

# Used when config.yaml is absent; mirrors the checked-in file.
DEFAULT_REPORT_CONFIG: dict = {
    "artist_id": "4d8b92b34eb68a1b2c0003f4",  # Andy Warhol
    "similar_count": 100,
    "similarity_type": "contemporary",
    "gene_page_size": 100,
    "min_similarity": 0.1,
    "min_theme_count": 10,
    "title": "Curatorator",
}


def load_config(path: str = "config/config.yaml", settings: Settings | None = None) -> dict:
    """Load YAML config and merge with environment-based Settings.

    Args:
        path: Path to the YAML configuration file.
        settings: Settings instance to merge; a fresh one is built if omitted.

    Returns:
        Fully resolved configuration dictionary with ``report``, ``api``
        and ``logging`` sections.

    Raises:
        ConfigurationError: If the YAML file does not contain a mapping.
    """
    config_path = Path(path)
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            yaml_config = yaml.safe_load(f) or {}
        if not isinstance(yaml_config, dict):
            raise ConfigurationError(f"{config_path} must contain a YAML mapping")
    else:
        yaml_config = {}

    config: dict = {"report": dict(DEFAULT_REPORT_CONFIG)}
    _deep_merge(config, yaml_config)

    settings = settings or Settings()
    env_overrides = {
        "api": {
            "root": settings.artsy_api_root,
            "xapp_token": settings.artsy_xapp_token,
            "accept": settings.artsy_accept,
            "timeout": settings.http_timeout,
        },
        "logging": {
            "level": settings.log_level,
            "json": settings.app_env == "production",
        },
    }

    _deep_merge(config, env_overrides)
    return config


def _deep_merge(base: dict, overrides: dict) -> None:
    """Recursively merge overrides into base dict, mutating base in place."""
    for key, value in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
