"""Buffered log that is written to its file in a single step."""

from __future__ import annotations

import os


class Logger:
    """Collects text in memory and writes it to its file once, on flush.

    After a flush (or after its contents were handed over with :meth:`take`)
    the logger is finalized: it forgets its path and ignores further writes.
    A logger without a path keeps its text and never writes a file.
    """

    def __init__(self, path: str | os.PathLike[str] | None) -> None:
        self._path = os.fspath(path) if path is not None else ""
        self._parts: list[str] = []
        self._finalized = False

    @property
    def path(self) -> str:
        """The file the log goes to, or an empty string."""
        return self._path

    @property
    def finalized(self) -> bool:
        return self._finalized

    @property
    def text(self) -> str:
        """Everything written so far and not yet flushed."""
        return "".join(self._parts)

    def __lshift__(self, text: str) -> Logger:
        self.write(text)
        return self

    def write(self, text: str) -> None:
        """Append text unless the logger is finalized."""
        if not self._finalized:
            self._parts.append(text)

    def flush(self) -> None:
        """Write the collected text and a newline to the file, then finalize.

        Nothing happens when the logger is finalized or has no path. A file
        that cannot be opened is silently skipped.
        """
        if self._finalized or not self._path:
            return
        try:
            with open(self._path, "w", encoding="utf-8") as logfile:
                logfile.write(self.text + "\n")
        except OSError:
            pass
        self._finalize()

    def take(self) -> Logger:
        """Move path and contents into a new logger and finalize this one."""
        other = Logger(self._path)
        if not self._finalized:
            other._parts = list(self._parts)
        other._finalized = self._finalized
        self._finalize()
        return other

    def _finalize(self) -> None:
        self._finalized = True
        self._parts = []
        self._path = ""