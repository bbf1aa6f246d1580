"""
Configuration for talking to a browser's remote-debugging port.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_CONNECT_TIMEOUT = 10.0
DEFAULT_MAX_MESSAGE_SIZE = 10 * 1024 * 1024  # 10 MiB


@dataclass
class ToolConfig:
    """Configuration options for cookie operations."""

    host: str = "localhost"
    port: int = 9222
    discovery_timeout: float = 5.0
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    max_message_size: int = DEFAULT_MAX_MESSAGE_SIZE
    # None waits for the response indefinitely
    read_timeout: Optional[float] = None
