"""
Mocked runtime configuration.

Handlers read their runtime config through get_config(). Tests set it with
mock_config() and reset it with clear_config(); when nothing is mocked the
CLOUD_RUNTIME_CONFIG setting is parsed instead.
"""

import json
import logging
from typing import Any, Dict, Optional

from .config import load_settings
from .core.exceptions import ConfigError

logger = logging.getLogger("trigger_harness.runtime_config")

_mocked_config: Optional[Dict[str, Any]] = None


def mock_config(conf: Dict[str, Any]) -> None:
    """Replace the process-wide runtime config."""
    global _mocked_config
    _mocked_config = conf
    logger.debug(f"Mocked runtime config with keys {sorted(conf)}")


def clear_config() -> None:
    global _mocked_config
    _mocked_config = None


def get_config() -> Dict[str, Any]:
    """
    Return the runtime config visible to handlers.

    Raises:
        ConfigError: CLOUD_RUNTIME_CONFIG is set but is not a JSON object.
    """
    if _mocked_config is not None:
        return _mocked_config

    raw = load_settings().CLOUD_RUNTIME_CONFIG
    if not raw:
        return {}

    try:
        conf = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"CLOUD_RUNTIME_CONFIG is not valid JSON: {e}") from e

    if not isinstance(conf, dict):
        raise ConfigError("CLOUD_RUNTIME_CONFIG must be a JSON object")
    return conf
