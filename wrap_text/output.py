"""Output writer for formatted text.

The writer persists formatted text to disk so the CLI commands stay free
of file handling details.
"""

from __future__ import annotations

from pathlib import Path


class TxtWriter:
    """Writer for UTF-8 text files."""

    def _prepare_path(self, output: str | Path) -> Path:
        """Ensure parent directories exist and return a ``Path`` instance.

        Args:
            output: Destination path provided by the caller.

        Returns:
            Path: Normalized path pointing to the output file.
        """
        path = Path(output)
        path.parent.mkdir(parents=True, exist_ok=True)
        return path

    def write(self, text: str, output: str | Path) -> Path:
        """Persist ``text`` to ``output`` using UTF-8 encoding.

        Args:
            text: Text to write.
            output: Path that will receive the text file.

        Returns:
            Path: The file that was written.
        """
        path = self._prepare_path(output)
        path.write_text(text, encoding="utf-8")
        return path
