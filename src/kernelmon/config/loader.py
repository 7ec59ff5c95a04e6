"""
Locating and reading the kernelmon config.toml.

The loader owns everything that can go wrong with the file itself (it is
missing, unreadable or not valid TOML) and reports the top-level tables it
found. Checking the values inside those tables is left to the validators.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from ..validation import handle_config_error, ErrorSeverity

logger = logging.getLogger(__name__)

# Top-level tables kernelmon understands
CONFIG_SECTIONS = ("global", "writer", "inputs")

# conf/config.toml next to src/ in a source or editable checkout
SOURCE_TREE_CONFIG = Path(__file__).resolve().parents[3] / "conf" / "config.toml"


def default_config_path(candidates: Optional[Sequence[Path]] = None) -> Path:
    """
    Pick the config.toml used when --config is not given.

    The checkout's conf/config.toml is preferred, then conf/config.toml
    under the current working directory. If neither exists the working
    directory candidate is returned so the eventual error names it.

    Args:
        candidates: Paths to try in order (defaults to the two above)

    Returns:
        The first existing candidate, or the last one
    """
    if candidates is None:
        candidates = (SOURCE_TREE_CONFIG, Path.cwd() / "conf" / "config.toml")

    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return candidates[-1]


def load_config_file(config_path: Path) -> Dict[str, Any]:
    """
    Read and parse a kernelmon config.toml.

    Unknown top-level tables are logged and left in place; missing
    [global], [writer] and [inputs] tables fall back to defaults later.

    Args:
        config_path: Path to the config.toml file

    Returns:
        The parsed document

    Raises:
        FileNotFoundError: If the file doesn't exist
        OSError: If the file exists but cannot be read
        tomllib.TOMLDecodeError: If the file is malformed
    """
    config_path = Path(config_path)
    logger.info(f"Loading kernelmon configuration from: {config_path}")

    try:
        with open(config_path, "rb") as f:
            config_data = tomllib.load(f)
    except FileNotFoundError as e:
        handle_config_error(
            error=e,
            context=f"file {config_path} (pass --config or create conf/config.toml)",
            severity=ErrorSeverity.CRITICAL,
            reraise=True,
            logger=logger
        )
        raise
    except tomllib.TOMLDecodeError as e:
        handle_config_error(
            error=e,
            context=f"parsing {config_path}",
            severity=ErrorSeverity.CRITICAL,
            reraise=True,
            logger=logger
        )
        raise
    except OSError as e:
        handle_config_error(
            error=e,
            context=f"reading {config_path}",
            severity=ErrorSeverity.ERROR,
            reraise=True,
            logger=logger
        )
        raise

    unknown = sorted(set(config_data) - set(CONFIG_SECTIONS))
    if unknown:
        logger.warning(f"Ignoring unknown tables in {config_path}: {unknown}")

    missing = [name for name in CONFIG_SECTIONS if name not in config_data]
    if missing:
        logger.debug(f"No {missing} tables in {config_path}, using defaults")

    return config_data
