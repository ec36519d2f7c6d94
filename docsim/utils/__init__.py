"""Utility modules for the document similarity engine.
"""

from .io_utils import load_candidates, load_settings, read_text_file, reload_settings
from .logging_utils import get_logger, setup_logging
from .path_utils import get_config_path, get_project_root

__all__ = [
    "get_config_path",
    "get_logger",
    "get_project_root",
    "load_candidates",
    "load_settings",
    "read_text_file",
    "reload_settings",
    "setup_logging",
]
