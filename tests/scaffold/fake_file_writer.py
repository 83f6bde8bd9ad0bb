"""FakeFileWriter: test double for LocalFileWriter.

Keeps written files in memory and can be told to fail on a given path.
"""


class FakeFileWriter:
    """Test double that records write_text() calls instead of touching disk."""

    def __init__(self, events=None):
        self.files = {}
        self.events = events if events is not None else []
        self._fail_on = set()

    def fail_on(self, path):
        self._fail_on.add(path)

    def write_text(self, path, content):
        if path in self._fail_on:
            raise RuntimeError(f"Error writing file {path}: Permission denied")
        self.events.append(("write", path))
        self.files[path] = content
        return path
