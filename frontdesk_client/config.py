"""
Client configuration.

Values come from the environment, optionally via a ``.env`` file in the
working directory, the same way the server settings are loaded.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv  # type: ignore

DEFAULT_API_URL = "http://localhost:8000"
DEFAULT_TIMEOUT = 5.0
DEFAULT_PLACEHOLDER_PREFIX = "local-"


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = DEFAULT_API_URL
    # seconds; None leaves the transport default (no timeout)
    timeout: Optional[float] = DEFAULT_TIMEOUT
    placeholder_prefix: str = DEFAULT_PLACEHOLDER_PREFIX

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> "ClientConfig":
        env_path = env_file or Path.cwd() / ".env"
        if env_path.exists():
            load_dotenv(dotenv_path=env_path)
        timeout = os.getenv("FRONTDESK_TIMEOUT", str(DEFAULT_TIMEOUT)).strip()
        return cls(
            base_url=os.getenv("FRONTDESK_API_URL", DEFAULT_API_URL).rstrip("/"),
            timeout=float(timeout) if timeout and timeout.lower() != "none" else None,
            placeholder_prefix=os.getenv("FRONTDESK_PLACEHOLDER_PREFIX", DEFAULT_PLACEHOLDER_PREFIX),
        )
