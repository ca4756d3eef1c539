"""Configuration for httpdiff."""

from httpdiff.config.settings import DiffConfig, load_config

__all__ = ["DiffConfig", "load_config"]
