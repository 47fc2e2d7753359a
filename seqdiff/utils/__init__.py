"""Utility functions for the project."""

from .lines import read_lines, collect_sequences
from .serialization import config_to_dict, config_from_dict, load_config, save_config

__all__ = [
    "read_lines",
    "collect_sequences",
    "config_to_dict",
    "config_from_dict",
    "load_config",
    "save_config",
]
