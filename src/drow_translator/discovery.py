"""
Project discovery module.
Implements walk-up algorithm to find drow-translator.toml from CWD.
"""
from pathlib import Path
from typing import Optional

MARKER_FILE = "drow-translator.toml"

# tomllib is stdlib in Python 3.11+, tomli for older versions
try:
    import tomllib
except ImportError:
    import tomli as tomllib

DEFAULT_DICTIONARY_PATH = "Data/drow_dictionary.db"
DEFAULT_GREETING = "Welcome to Drow Translatascan."


def find_project_root(start_dir: Optional[Path] = None) -> Path:
    """Walk up from start_dir (default: CWD) looking for drow-translator.toml.

    Returns the directory containing the marker file.
    Raises FileNotFoundError if not found anywhere up to filesystem root.
    """
    current = (start_dir or Path.cwd()).resolve()
    while True:
        if (current / MARKER_FILE).is_file():
            return current
        if current == current.parent:
            break
        current = current.parent
    raise FileNotFoundError(
        f"{MARKER_FILE} not found. Run `drow-translator init` to create a project."
    )


def load_project_config(project_root: Path) -> dict:
    """Load and parse drow-translator.toml with defaults applied.

    Args:
        project_root: Path to the directory containing drow-translator.toml
    Returns:
        dict with merged config (file values + defaults)
    Raises:
        FileNotFoundError: if drow-translator.toml doesn't exist
        ValueError: if a known section is not a table
    """
    toml_path = project_root / MARKER_FILE
    if not toml_path.is_file():
        raise FileNotFoundError(f"{MARKER_FILE} not found at {project_root}")

    with open(toml_path, 'rb') as f:
        config = tomllib.load(f)

    for section in ('project', 'dictionary', 'server', 'logging'):
        config.setdefault(section, {})
        if not isinstance(config[section], dict):
            raise ValueError(f"[{section}] in {MARKER_FILE} must be a table")

    # Apply defaults
    config['project'].setdefault('name', project_root.name)

    config['dictionary'].setdefault('path', DEFAULT_DICTIONARY_PATH)

    config['server'].setdefault('host', '127.0.0.1')
    config['server'].setdefault('port', 7071)
    config['server'].setdefault('greeting', DEFAULT_GREETING)

    config['logging'].setdefault('debug', False)
    config['logging'].setdefault('log_dir', 'logs')

    return config
