from __future__ import annotations
import threading
import time
from pathlib import Path
from typing import Dict, Optional

from ..models.errors import TemplateFileError
from ..utils.logging_tools import critical, error, info
from .loader import TemplateMap, load_template_file


class TemplateStore:
    """In-memory copy of a template file, reloaded when the file looks newer.

    ``last_load_time`` is the load anchor: the file mtime (ns) seen right before
    the load that produced the current ``templates``. Before the first load it
    holds the construction time. A lookup reloads when the anchor is older than
    the file's mtime, or when nothing has been loaded yet.

    Methods do not lock; callers hold ``lock`` around each lookup.
    """

    def __init__(self, path: Path):
        self._path = Path(path)
        self.lock = threading.Lock()
        self._last_load_time: Optional[int] = time.time_ns()
        self._templates: TemplateMap = {}
        self.refresh()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def last_load_time(self) -> Optional[int]:
        return self._last_load_time

    @property
    def templates(self) -> TemplateMap:
        return self._templates

    @property
    def is_loaded(self) -> bool:
        return bool(self._templates)

    def refresh_and_get(self, parent: str) -> Optional[Dict[str, str]]:
        self.refresh()
        return self._templates.get(parent)

    def refresh(self) -> None:
        try:
            mtime = self._path.stat().st_mtime_ns
        except OSError as e:
            error("cannot read template (%s) file: %s", self._path, e)
            return

        start = self._last_load_time
        if start is None:
            critical("template state is fatally invalid. please restart the process")
            return

        # Same-mtime saves are not seen as changes.
        if not (start < mtime or not self._templates):
            return

        try:
            templates = load_template_file(self._path)
        except TemplateFileError as e:
            info("cannot read templates from '%s'. not updating them (%s)", self._path, e.reason)
            return

        self._templates = templates
        self._last_load_time = mtime
        info("reloaded templates from '%s' (%d parents)", self._path, len(templates))
