""" Flat filename -> content stores used by the file verbs. """
import json
import logging
import os
import tempfile

from constants import DEFAULT_FILES

logger = logging.getLogger(__name__)


class MemoryFileStore:
    """
    Files kept in a dict for the lifetime of the session.
    Names are expected to be canonical (uppercase) already.
    """
    def __init__(self, files=None):
        self.files = dict(files) if files else {}

    def get(self, name):
        return self.files.get(name)

    def __contains__(self, name):
        return name in self.files

    def put(self, name, content):
        self.files[name] = content
        self.flush()

    def delete(self, name):
        del self.files[name]
        self.flush()

    def list(self) -> list[str]:
        return list(self.files)

    def clear(self):
        self.files.clear()
        self.flush()

    def flush(self):
        pass


class JsonFileStore(MemoryFileStore):
    """
    Store persisted as a single JSON object in `path`.

    A missing file is seeded with DEFAULT_FILES. The whole document is
    rewritten after every change.
    """
    def __init__(self, path):
        self.path = path
        super().__init__(self._load())
        if not os.path.exists(path):
            self.flush()

    def _load(self):
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.debug("no store at %s, using default files", self.path)
            return DEFAULT_FILES

        if not isinstance(data, dict):
            raise ValueError(f"{self.path}: expected a JSON object of files")
        return {str(k).upper(): str(v) for k, v in data.items()}

    def flush(self):
        directory = os.path.dirname(os.path.abspath(self.path))
        fd, tmp = tempfile.mkstemp(prefix=".iqsh-", dir=directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(self.files, f, indent=2)
            os.replace(tmp, self.path)
        except BaseException:
            os.unlink(tmp)
            raise
        logger.debug("wrote %d file(s) to %s", len(self.files), self.path)
