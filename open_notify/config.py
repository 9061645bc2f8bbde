"""
Configuration management for the open-notify client.

:copyright: (c) 2025 by Meir Miyara.
:license: MPL-2.0, see LICENSE for more details.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

_LOG = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "base_url": "http://api.open-notify.org",
    "timeout": 10.0,
    "user_agent": "open-notify-client",
    "strict_people_count": True,
}

ENDPOINTS = {
    "astros": {
        "path": "/astros.json",
        "description": "People currently in space"
    },
    "iss-now": {
        "path": "/iss-now.json",
        "description": "Current ISS location"
    },
    "iss-pass": {
        "path": "/iss-pass.json",
        "description": "ISS overhead pass predictions"
    }
}


class Config:
    """Configuration for the open-notify client."""

    def __init__(self, config_file_path: Optional[str] = None, **overrides: Any):
        """Initialize configuration, applying keyword overrides last."""
        self._config_file_path = config_file_path
        self._config: Dict[str, Any] = {}
        self.load()
        self._config.update({k: v for k, v in overrides.items() if v is not None})

    def load(self) -> None:
        """Load configuration from file on top of the defaults."""
        self._config = DEFAULT_CONFIG.copy()
        if not self._config_file_path:
            return
        try:
            if os.path.exists(self._config_file_path):
                with open(self._config_file_path, "r", encoding="utf-8") as file:
                    data = json.load(file)
                if not isinstance(data, dict):
                    raise ValueError("top level must be a JSON object")
                self._config.update(data)
                _LOG.info("Configuration loaded from %s", self._config_file_path)
            else:
                _LOG.info("Configuration file not found, using defaults")
        except (OSError, ValueError) as ex:
            _LOG.error("Failed to load configuration: %s", ex)
            self._config = DEFAULT_CONFIG.copy()

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self._config.get(key, default)

    @property
    def base_url(self) -> str:
        """Get API base URL without trailing slash."""
        return str(self._config.get("base_url", DEFAULT_CONFIG["base_url"])).rstrip("/")

    @property
    def timeout(self) -> Optional[float]:
        """Get total request timeout in seconds, None to disable."""
        timeout = self._config.get("timeout", DEFAULT_CONFIG["timeout"])
        return float(timeout) if timeout is not None else None

    @property
    def user_agent(self) -> str:
        return self._config.get("user_agent", DEFAULT_CONFIG["user_agent"])

    @property
    def strict_people_count(self) -> bool:
        """Whether a 'number'/'people' mismatch in astros responses is an error."""
        strict = self._config.get("strict_people_count", DEFAULT_CONFIG["strict_people_count"])
        if not isinstance(strict, bool):
            _LOG.warning("Ignoring non-boolean strict_people_count: %r", strict)
            return DEFAULT_CONFIG["strict_people_count"]
        return strict

    def endpoint_url(self, endpoint_id: str) -> str:
        """Get the full URL of an endpoint."""
        endpoint = ENDPOINTS.get(endpoint_id)
        if endpoint is None:
            raise KeyError(f"Unknown endpoint: {endpoint_id}")
        return f"{self.base_url}{endpoint['path']}"
