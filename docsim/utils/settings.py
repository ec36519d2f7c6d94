"""
Accessors and validation for the ``similarity`` settings section.
"""

import math
from typing import Any, List

from docsim.similarity.metrics import EDIT_DISTANCE_ENGINES
from docsim.similarity.scoring import COMBINED_WEIGHTS

__all__ = [
    "DEFAULT_CONFIGURED_ENGINE",
    "get_edit_distance_engine",
    "get_max_input_chars",
    "validate_settings",
]

# The dp table is the reference engine; configured runs default to RapidFuzz
DEFAULT_CONFIGURED_ENGINE = "rapidfuzz"
DEFAULT_MAX_INPUT_CHARS = 20000


def _section(mapping: Any, key: str) -> dict[str, Any]:
    """Sub-mapping at ``key``, or ``{}`` when absent or not a mapping."""
    if not isinstance(mapping, dict):
        return {}
    value = mapping.get(key)
    return value if isinstance(value, dict) else {}


def get_edit_distance_engine(settings: dict[str, Any] | None = None) -> str:
    """Configured edit-distance engine, ``rapidfuzz`` when unset."""
    engine = _section(_section(settings, "similarity"), "edit_distance").get(
        "engine", DEFAULT_CONFIGURED_ENGINE,
    )
    return str(engine).lower()


def get_max_input_chars(settings: dict[str, Any] | None = None) -> int:
    """Configured input cap in characters; 0 disables truncation."""
    return int(
        _section(settings, "similarity").get("max_input_chars", DEFAULT_MAX_INPUT_CHARS),
    )


def validate_settings(settings: dict[str, Any]) -> List[str]:
    """Returns list of validation warnings.

    Args:
        settings: Settings dict to validate.

    Returns:
        List of validation warning messages.
    """
    warnings = []
    raw_similarity = settings.get("similarity") if isinstance(settings, dict) else None
    if raw_similarity is not None and not isinstance(raw_similarity, dict):
        warnings.append(f"similarity must be a mapping, got {raw_similarity!r} (ignored)")
    similarity = _section(settings, "similarity")

    engine = _section(similarity, "edit_distance").get("engine", DEFAULT_CONFIGURED_ENGINE)
    if str(engine).lower() not in EDIT_DISTANCE_ENGINES:
        warnings.append(
            f"similarity.edit_distance.engine must be one of {list(EDIT_DISTANCE_ENGINES)}, got {engine}"
        )

    max_input_chars = similarity.get("max_input_chars", DEFAULT_MAX_INPUT_CHARS)
    if isinstance(max_input_chars, bool) or not isinstance(max_input_chars, int) or max_input_chars < 0:
        warnings.append(f"similarity.max_input_chars must be int >= 0, got {max_input_chars}")

    # Weights are fixed; a differing config is reported, never applied
    weights = similarity.get("weights")
    if weights is not None:
        expected = COMBINED_WEIGHTS.as_dict()
        for key, value in expected.items():
            configured = weights.get(key) if isinstance(weights, dict) else None
            if not isinstance(configured, (int, float)) or not math.isclose(configured, value):
                warnings.append(
                    f"similarity.weights.{key} is fixed at {value}, got {configured} (ignored)"
                )

    return warnings
