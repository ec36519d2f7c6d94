"""IO utilities for settings and candidate document files."""

import copy
import functools
import logging
from pathlib import Path
from typing import Any

import pandas as pd
import yaml

from docsim.utils.logging_utils import LOG_FORMAT, get_logger

logger = get_logger(__name__)

# Settings loading counter for debugging
_settings_load_count = 0

DEFAULTS: dict[str, Any] = {
    "similarity": {
        "edit_distance": {"engine": "rapidfuzz"},
        "max_input_chars": 20000,
        "weights": {"jaccard": 0.4, "cosine": 0.4, "edit_distance": 0.2},
    },
    "logging": {
        "level": "INFO",
        "format": LOG_FORMAT,
        "file": None,
    },
}

CANDIDATE_COLUMNS = ["id", "name", "content"]
SUPPORTED_CANDIDATE_FORMATS = [".csv", ".json", ".xlsx", ".xls"]


def _deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    for key, value in update.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        elif key in base and isinstance(base[key], dict) and value is None:
            # An empty YAML section keeps its defaults
            continue
        else:
            base[key] = value
    return base


@functools.lru_cache(maxsize=1)
def load_settings(path: str) -> dict[str, Any]:
    """Load settings from YAML file with defaults.

    This function is cached to prevent repeated file I/O and parsing.
    Use reload_settings() to force a fresh load.

    Args:
        path: Path to settings YAML file

    Returns:
        Dictionary with settings (user config merged over defaults)

    """
    global _settings_load_count
    _settings_load_count += 1

    logger.debug(f"Settings loaded (count: {_settings_load_count}) from {path}")

    try:
        with open(path, encoding="utf-8") as f:
            user_config = yaml.safe_load(f) or {}

        if not isinstance(user_config, dict):
            logging.warning(
                f"Settings file {path} must hold a mapping, got {type(user_config).__name__}. "
                "Using defaults.",
            )
            return copy.deepcopy(DEFAULTS)

        return _deep_merge(copy.deepcopy(DEFAULTS), user_config)

    except FileNotFoundError:
        logging.warning(f"Settings file not found: {path}. Using defaults.")
        return copy.deepcopy(DEFAULTS)
    except Exception as e:
        logging.exception(f"Error loading settings: {e}. Using defaults.")
        return copy.deepcopy(DEFAULTS)


def reload_settings(path: str) -> dict[str, Any]:
    """Force reload settings from file (clears cache).

    Args:
        path: Path to settings YAML file

    Returns:
        Freshly loaded settings

    """
    load_settings.cache_clear()
    return load_settings(path)


def get_settings_load_count() -> int:
    """Get the total number of times settings have been loaded."""
    return _settings_load_count


def read_text_file(path: str, encoding: str = "utf-8") -> str:
    """Read a whole text document."""
    text = Path(path).read_text(encoding=encoding)
    logger.debug(f"Read {len(text)} characters from {path}")
    return text


def load_candidates(path: str) -> list[dict[str, Any]]:
    """Load candidate documents from a CSV, JSON or Excel file.

    Args:
        path: Path to a file with ``id``, ``name`` and ``content`` columns

    Returns:
        List of candidate records in file order

    Raises:
        ValueError: If the format is unsupported or required columns are missing

    """
    suffix = Path(path).suffix.lower()
    if suffix not in SUPPORTED_CANDIDATE_FORMATS:
        raise ValueError(
            f"Unsupported candidate file format '{suffix}'. "
            f"Expected one of {SUPPORTED_CANDIDATE_FORMATS}",
        )

    if suffix == ".csv":
        df = pd.read_csv(path, dtype={"id": str}, keep_default_na=False)
    elif suffix == ".json":
        df = pd.read_json(path, orient="records", dtype={"id": str})
    else:
        df = pd.read_excel(path, dtype={"id": str})

    missing = [col for col in CANDIDATE_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"Candidate file {path} is missing columns: {missing}")

    # Blank cells become empty content rather than NaN
    df["content"] = df["content"].fillna("").astype(str)
    records = df[CANDIDATE_COLUMNS].to_dict(orient="records")
    logger.info(f"Loaded {len(records)} candidates from {path}")
    return records


def write_results_csv(df: pd.DataFrame, path: str, index: bool = False) -> str:
    """Write a results DataFrame to CSV and return the path written."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=index)
    logger.info(f"Wrote {len(df)} result rows to {path}")
    return path
