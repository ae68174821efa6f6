"""Process-wide template store and the public lookup functions.

The first call binds the shared store to a file path; later path arguments are
ignored until ``reset_store()``. Every lookup holds the store lock for the whole
refresh-and-get, so concurrent callers never race a reload.
"""
from __future__ import annotations
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, Optional

from .config import settings
from .templates.store import TemplateStore
from .utils.logging_tools import info

_INIT_LOCK = threading.Lock()
_store: TemplateStore | None = None


def get_store(path: Path | str | None = None) -> TemplateStore:
    """Return the shared store, creating it bound to ``path`` on first use."""
    global _store
    store = _store
    if store is not None:
        return store
    with _INIT_LOCK:
        if _store is None:
            target = Path(path) if path is not None else settings.TEMPLATE_FILE
            info("binding template store to '%s'", target)
            _store = TemplateStore(target)
        return _store


def reset_store() -> None:
    """Forget the shared store so the next lookup binds a new one."""
    global _store
    with _INIT_LOCK:
        _store = None


@contextmanager
def locked_store(path: Path | str | None = None) -> Iterator[TemplateStore]:
    """Hold the shared store's lock for the duration of the block."""
    store = get_store(path)
    with store.lock:
        yield store


def resolve(parent: str, name: str, path: Path | str | None = None) -> Optional[str]:
    """Look up template ``name`` under ``parent``, reloading the file if it changed.

    Returns ``None`` when either key is missing or nothing could be loaded.
    """
    with locked_store(path) as store:
        found = store.refresh_and_get(parent)
        if found is None:
            return None
        return found.get(name)


def resolve_parent(parent: str, path: Path | str | None = None) -> Optional[Dict[str, str]]:
    """Same as ``resolve`` but returns a copy of every template under ``parent``."""
    with locked_store(path) as store:
        found = store.refresh_and_get(parent)
        return dict(found) if found is not None else None


def store_status(path: Path | str | None = None) -> dict:
    # Reports the cached state only; does not trigger a refresh.
    with locked_store(path) as store:
        return {
            "path": str(store.path),
            "last_load_time": store.last_load_time,
            "loaded": store.is_loaded,
            "parents": sorted(store.templates),
        }


__all__ = [
    "get_store",
    "reset_store",
    "locked_store",
    "resolve",
    "resolve_parent",
    "store_status",
]
