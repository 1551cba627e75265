# Copyright 2025 DataStax Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not
# use this file except in compliance with the License. You may obtain a copy of
# the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations under
# the License.

"""Client configuration.

Configuration can be built directly, read from environment variables, or loaded
from a YAML/JSON file:

    ```yaml
    base_url: mastodon.social
    token: abc123
    timeout: 10
    headers:
      Accept-Language: en
    ```
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigurationError

DEFAULT_USER_AGENT = "fedi-api/0.1.0"


@dataclass
class ClientConfig:
    """Settings used to construct a ``Client``.

    Attributes:
        base_url: Instance URL; ``https://`` is assumed when no scheme is given.
        token: Optional access token.
        timeout: Request timeout in seconds.
        user_agent: Value of the ``User-Agent`` header.
        headers: Additional default headers.
    """

    base_url: str
    token: str | None = None
    timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
    headers: dict[str, str] = field(default_factory=dict)

    def default_headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent, **self.headers}

    @classmethod
    def from_env(cls, prefix: str = "FEDI_API_") -> ClientConfig:
        """Read configuration from environment variables.

        - ``<prefix>BASE_URL``: instance URL (required)
        - ``<prefix>TOKEN``: access token
        - ``<prefix>TIMEOUT``: timeout in seconds (default: 30)
        - ``<prefix>USER_AGENT``: user agent string

        Raises:
            ConfigurationError: If the base URL is missing or the timeout is invalid.
        """
        base_url = os.environ.get(f"{prefix}BASE_URL")
        if not base_url:
            raise ConfigurationError(f"{prefix}BASE_URL is not set")

        timeout_str = os.environ.get(f"{prefix}TIMEOUT", "30")
        try:
            timeout = float(timeout_str)
        except ValueError as e:
            raise ConfigurationError(
                f"{prefix}TIMEOUT must be a number, got {timeout_str!r}"
            ) from e

        return cls(
            base_url=base_url,
            token=os.environ.get(f"{prefix}TOKEN") or None,
            timeout=timeout,
            user_agent=os.environ.get(f"{prefix}USER_AGENT", DEFAULT_USER_AGENT),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ClientConfig:
        if "base_url" not in data:
            raise ConfigurationError("Configuration is missing 'base_url'")
        unknown = set(data) - {"base_url", "token", "timeout", "user_agent", "headers"}
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {sorted(unknown)}")
        try:
            return cls(
                base_url=str(data["base_url"]),
                token=data.get("token"),
                timeout=float(data.get("timeout", 30.0)),
                user_agent=data.get("user_agent", DEFAULT_USER_AGENT),
                headers=dict(data.get("headers") or {}),
            )
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    @classmethod
    def from_file(cls, path: str | Path) -> ClientConfig:
        """Load configuration from a YAML or JSON file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigurationError: If the file is not a mapping or is missing keys
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")
        with open(path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Could not parse {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration in {path} must be a mapping")
        return cls.from_dict(data)
