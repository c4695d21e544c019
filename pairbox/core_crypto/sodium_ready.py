"""
Cryptography subsystem readiness gate.

libsodium must be initialized once per process before any primitive is
used. ensure_sodium_ready() performs that initialization exactly once and
is safe to call from many threads at the same time.
"""

import functools
import logging
import threading
from typing import Callable, TypeVar

import nacl.bindings

logger = logging.getLogger(__name__)

F = TypeVar('F', bound=Callable)

_ready = False
_ready_lock = threading.Lock()


def ensure_sodium_ready() -> None:
    """
    Initialize libsodium once for this process.

    Subsequent calls return immediately without taking the lock.
    """
    global _ready
    if _ready:
        return
    with _ready_lock:
        if _ready:
            return
        nacl.bindings.sodium_init()
        _ready = True
        logger.debug("libsodium initialized")


def is_sodium_ready() -> bool:
    """Check whether the gate has already been passed."""
    return _ready


def requires_sodium(func: F) -> F:
    """Decorator that passes through the readiness gate before calling func."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        ensure_sodium_ready()
        return func(*args, **kwargs)
    return wrapper
