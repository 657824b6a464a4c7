"""Temporary output directory for inlined localized builds.

When locales are inlined, the build writes to a private temporary
directory that a later stage splits per locale. The directory belongs to
one build invocation and is removed at interpreter exit at the latest.

Python 3.13+.
"""

from __future__ import annotations

import atexit
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Self

from i18nbuild.constants import INLINE_OUTPUT_PREFIX

__all__ = ["InlineOutputDirectory"]

logger = logging.getLogger(__name__)


class InlineOutputDirectory:
    """Uniquely named temporary directory with best-effort cleanup.

    Created on construction inside the realpath of the platform temp
    root. cleanup() runs once: when called explicitly, when a with-block
    exits, or at interpreter exit. Removal errors are ignored.

    Example:
        >>> with InlineOutputDirectory() as output:
        ...     _ = (output.path / "main.js").write_text("...")
        >>> output.path.exists()
        False
    """

    __slots__ = ("_cleaned_up", "_path")

    def __init__(self, prefix: str = INLINE_OUTPUT_PREFIX) -> None:
        """Create the directory and register exit-time cleanup.

        Args:
            prefix: Directory name prefix
        """
        temp_root = os.path.realpath(tempfile.gettempdir())
        self._path = Path(tempfile.mkdtemp(prefix=prefix, dir=temp_root))
        self._cleaned_up = False
        atexit.register(self.cleanup)
        logger.info("Created inline output directory %s", self._path)

    @property
    def path(self) -> Path:
        """Absolute path of the directory."""
        return self._path

    @property
    def cleaned_up(self) -> bool:
        """Check if cleanup() has already run."""
        return self._cleaned_up

    def cleanup(self) -> None:
        """Remove the directory tree; later calls do nothing."""
        if self._cleaned_up:
            return
        self._cleaned_up = True
        atexit.unregister(self.cleanup)
        shutil.rmtree(self._path, ignore_errors=True)
        logger.debug("Removed inline output directory %s", self._path)

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.cleanup()

    def __fspath__(self) -> str:
        return str(self._path)

    def __repr__(self) -> str:
        return f"InlineOutputDirectory({str(self._path)!r})"
