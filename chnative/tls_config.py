"""Process-wide registry of named TLS configurations."""

from __future__ import annotations

import copy
import threading
from typing import Any

_lock = threading.RLock()
_registry: dict[str, Any] = {}


def register_tls_config(key: str, config: Any) -> None:
    """Register a TLS configuration under ``key``, replacing any earlier one."""
    with _lock:
        _registry[key] = config


def deregister_tls_config(key: str) -> None:
    """Remove the configuration registered under ``key``, if any."""
    with _lock:
        _registry.pop(key, None)


def get_tls_config(key: str) -> Any:
    """Return a copy of the configuration under ``key``, or None if absent.

    Objects that cannot be copied (such as ``ssl.SSLContext``) are returned as is.
    """
    with _lock:
        if key not in _registry:
            return None
        config = _registry[key]
    try:
        return copy.copy(config)
    except TypeError:
        return config