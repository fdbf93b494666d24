from __future__ import annotations

import logging
import os
from datetime import datetime

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = (".md", ".markdown")


class FileHandler:
    """Read captured terminal text and write converted documents."""

    def __init__(self, output_dir: str | None = None) -> None:
        """Initialize the file handler.

        Args:
            output_dir: Directory for converted files. When None, each file
                is written next to its input (or into the current directory
                for stdin input).
        """
        self._output_dir = output_dir

    def read_text(self, path: str) -> str:
        """Read a UTF-8 text file, tolerating a byte-order mark.

        Raises:
            OSError: If the file cannot be opened.
            UnicodeDecodeError: If the file is not valid UTF-8.
        """
        with open(path, encoding="utf-8-sig") as f:
            text = f.read()
        logger.debug("Read %d chars from %s", len(text), path)
        return text

    def write_text(self, path: str, content: str) -> None:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
        logger.debug("Wrote %d chars to %s", len(content), path)

    @staticmethod
    def is_markdown(path: str) -> bool:
        """Return True for inputs that are already Markdown (``.md``, ``.markdown``)."""
        return os.path.splitext(path)[1].lower() in MARKDOWN_EXTENSIONS

    @staticmethod
    def default_name(now: datetime | None = None) -> str:
        """Return a timestamp document name such as ``202610191530``."""
        return (now or datetime.now()).strftime("%Y%m%d%H%M")

    @staticmethod
    def markdown_name(name: str) -> str:
        """Append ``.md`` unless the name already ends with it (any case)."""
        if name.lower().endswith(".md"):
            return name
        return name + ".md"

    def output_dir_for(self, source_path: str | None) -> str:
        """Return the directory a converted ``source_path`` is written to."""
        if self._output_dir:
            return self._output_dir
        if source_path:
            return os.path.dirname(os.path.abspath(source_path))
        return os.getcwd()

    def get_output_path(self, directory: str, filename: str) -> str:
        """Return a path for ``filename`` in ``directory`` that does not exist yet.

        The directory is created if needed.  If a file with the given name
        already exists, a numeric suffix is appended (e.g. ``notes_1.md``,
        ``notes_2.md``) until a free name is found.

        Args:
            directory: Target directory.
            filename: Desired file name including extension.

        Returns:
            Path where the converted file should be written.
        """
        os.makedirs(directory, exist_ok=True)
        path = os.path.join(directory, filename)
        # Counter-based collision avoidance so earlier conversions are kept
        if os.path.exists(path):
            base, ext = os.path.splitext(filename)
            counter = 1
            while os.path.exists(path):
                path = os.path.join(directory, f"{base}_{counter}{ext}")
                counter += 1
        return path

    def output_path_for(self, source_path: str | None, extension: str) -> str:
        """Build a collision-free output path for a converted source.

        Args:
            source_path: Input file path, or None for stdin input (named
                after the current timestamp).
            extension: Output extension including the dot (``.md``/``.html``).

        Returns:
            Path where the converted document should be written.
        """
        if source_path:
            stem = os.path.splitext(os.path.basename(source_path))[0]
        else:
            stem = self.default_name()
        filename = self.markdown_name(stem) if extension == ".md" else stem + extension
        return self.get_output_path(self.output_dir_for(source_path), filename)
