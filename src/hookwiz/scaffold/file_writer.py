import os


class LocalFileWriter:
    """Writes generated files relative to a project directory."""

    def __init__(self, root: str = "."):
        self._root = root

    def write_text(self, path: str, content: str) -> str:
        """Write content to root/path, returning the full path.

        Raises:
            RuntimeError: If the file cannot be written.
        """
        full_path = os.path.join(self._root, path)
        try:
            with open(full_path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise RuntimeError(f"Error writing file {path}: {e}") from e
        return full_path
