"""
Configuration loader.
Wraps discovery.load_project_config() and resolves project-relative paths.
"""
from pathlib import Path
from typing import Optional
from drow_translator.discovery import find_project_root, load_project_config

def load_config(project_root: Optional[Path] = None) -> dict:
    """Load project configuration.

    If project_root is not provided, discovers it via walk-up from CWD.
    The resolved root is stored under config['project']['root'].

    Returns:
        dict: Configuration with all defaults applied
    Raises:
        FileNotFoundError: if drow-translator.toml not found
        ValueError: if config is invalid
    """
    if project_root is None:
        project_root = find_project_root()
    config = load_project_config(project_root)
    config['project']['root'] = project_root
    return config


def dictionary_path(config: dict) -> Path:
    """Dictionary database path, relative paths taken from the project root."""
    path = Path(config['dictionary']['path'])
    if path.is_absolute():
        return path
    return config['project']['root'] / path


def log_dir(config: dict) -> Path:
    path = Path(config['logging']['log_dir'])
    if path.is_absolute():
        return path
    return config['project']['root'] / path


def resolve_dictionary(override: Optional[str]) -> Path:
    """Dictionary path from a --dictionary flag, else from the project config."""
    if override:
        return Path(override)
    return dictionary_path(load_config())
