"""Optional framework context document.

The framework file holds auxiliary guidance (the Optimize-Then-Answer write-up)
that callers may show alongside analysis results. The engine never depends on
it: a missing or unreadable file is reported as a warning and analysis carries
on with the built-in rules.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from .paths import default_framework_path

log = logging.getLogger(__name__)


class FrameworkContext:
    """Read-once, read-only text resource.

    ``load()`` reads the file at most once per instance; later calls return
    the cached result, including a cached failure. There is no reload.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path).expanduser() if path else default_framework_path()
        self._text: Optional[str] = None
        self._attempted = False
        self.error: Optional[str] = None

    @property
    def attempted(self) -> bool:
        return self._attempted

    @property
    def loaded(self) -> bool:
        return self._text is not None

    @property
    def text(self) -> Optional[str]:
        return self.load()

    def load(self) -> Optional[str]:
        if self._attempted:
            return self._text
        self._attempted = True
        try:
            self._text = self.path.read_text(encoding="utf-8")
            log.debug("Loaded framework context from %s (%d chars)", self.path, len(self._text))
        except (OSError, UnicodeDecodeError) as e:
            self.error = str(e)
            log.warning("Could not load framework file %s: %s", self.path, e)
        return self._text
