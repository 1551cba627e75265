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

"""Logging configuration.

The library logs under the ``fedi_api`` logger hierarchy and installs no handlers
on import. Applications that want output can call ``setup_logging()``, which
reads its settings from environment variables:

- FEDI_API_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, default: WARNING)
- FEDI_API_LOG_FORMAT: ``json`` (default) or ``text``
- FEDI_API_LOG_DESTINATION: Where to log (stderr, file, comma-separated;
  default: stderr)
- FEDI_API_LOG_FILE: File path if file logging is enabled
"""

import json
import logging
import os
import sys
from datetime import UTC, datetime

LOGGER_NAME = "fedi_api"
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


class LogConfig:
    """Logging settings, read from the environment."""

    def __init__(self) -> None:
        log_level_str = os.environ.get("FEDI_API_LOG_LEVEL", "WARNING").upper()
        self.log_level = getattr(logging, log_level_str, logging.WARNING)
        self.log_format = os.environ.get("FEDI_API_LOG_FORMAT", "json").lower()

        dest_str = os.environ.get("FEDI_API_LOG_DESTINATION", "stderr")
        self.log_destinations = [d.strip() for d in dest_str.lower().split(",")]
        self.log_file = os.environ.get("FEDI_API_LOG_FILE")

    def __repr__(self) -> str:
        return (
            f"LogConfig(log_level={logging.getLevelName(self.log_level)}, "
            f"log_format={self.log_format}, "
            f"log_destinations={self.log_destinations})"
        )


class StructuredJsonFormatter(logging.Formatter):
    """Formats log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry)


def _formatter(config: LogConfig) -> logging.Formatter:
    if config.log_format == "text":
        return logging.Formatter(TEXT_FORMAT)
    return StructuredJsonFormatter()


def setup_logging(config: LogConfig | None = None) -> logging.Logger:
    """Attach handlers to the ``fedi_api`` logger.

    Existing handlers on that logger are replaced so repeated calls do not
    duplicate output. The root logger is left untouched.

    Args:
        config: Logging configuration. If None, reads from environment.

    Returns:
        The configured ``fedi_api`` logger.
    """
    if config is None:
        config = LogConfig()

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(config.log_level)
    for old_handler in list(package_logger.handlers):
        package_logger.removeHandler(old_handler)
        old_handler.close()

    for destination in config.log_destinations:
        if destination == "stderr":
            handler: logging.Handler = logging.StreamHandler(sys.stderr)
        elif destination == "file":
            if not config.log_file:
                logger.warning("File logging requested but FEDI_API_LOG_FILE not set")
                continue
            handler = logging.FileHandler(config.log_file)
        else:
            logger.warning(f"Unknown log destination: {destination}")
            continue
        handler.setLevel(config.log_level)
        handler.setFormatter(_formatter(config))
        package_logger.addHandler(handler)

    return package_logger
