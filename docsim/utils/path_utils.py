"""Path utilities for the document similarity engine."""

from pathlib import Path


def get_project_root() -> Path:
    """Get the project root directory.

    Returns:
        Path to the project root

    """
    return Path(__file__).parent.parent.parent


def get_config_path(filename: str = "settings.yaml") -> Path:
    """Get the path to a config file.

    Looks for a ``config`` directory holding ``filename`` in the current
    directory and its parents, then falls back to the project root.

    Args:
        filename: Name of the config file (default: settings.yaml)

    Returns:
        Path to the config file

    """
    current = Path.cwd()

    for parent in [current] + list(current.parents):
        config_dir = parent / "config"
        if config_dir.exists() and (config_dir / filename).exists():
            return config_dir / filename

    return get_project_root() / "config" / filename
