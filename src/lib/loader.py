"""
Text loader

Reads documents and code samples from disk. Paths are made absolute against
the current working directory before the filesystem is touched, so error
messages always name the absolute path.
"""

from pathlib import Path
from typing import Optional

from ..config import appsettings


class FileLoadError(Exception):
    """
    Raised when a file cannot be read

    Every read failure (missing file, permission denied, directory, bad
    encoding) is reported the same way.

    Attributes:
        path: Absolute path that was requested
        message: User-facing description of the failure
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.message = f'could not read file "{path}": {reason}'
        super().__init__(self.message)


def path_absolute(path: str) -> str:
    """
    Resolve a path against the current working directory

    No symlink resolution or '..' collapsing is performed.

    Example:
        >>> path_absolute('/tmp/deck.md')
        '/tmp/deck.md'
    """
    return str(Path(path).absolute())


class TextLoader:
    """Loads text files as strings"""

    def __init__(self, encoding: Optional[str] = None):
        self.encoding = encoding or appsettings.file_encoding

    def load(self, path: str) -> str:
        """
        Read a file's full contents

        Args:
            path: Absolute or CWD-relative path

        Returns:
            File contents

        Raises:
            FileLoadError: If the file cannot be read for any reason
        """
        abspath = path_absolute(path)
        try:
            return Path(abspath).read_text(encoding=self.encoding)
        except OSError as e:
            raise FileLoadError(abspath, (e.strerror or str(e)).lower()) from e
        except UnicodeDecodeError as e:
            raise FileLoadError(abspath, f"not valid {self.encoding} text") from e
