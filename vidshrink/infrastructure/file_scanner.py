import logging
from pathlib import Path
from typing import Iterable, List

class FileScanner:
    """Lists video files directly inside a directory (no recursion)."""

    def __init__(self, extensions: Iterable[str]):
        self.extensions = {ext.lstrip(".") for ext in extensions}
        self.logger = logging.getLogger(__name__)

    def has_allowed_extension(self, name: str) -> bool:
        # Case-sensitive, text after the last dot; names without a dot never match
        if "." not in name:
            return False
        return name.rsplit(".", 1)[1] in self.extensions

    def list_video_files(self, directory: Path) -> List[str]:
        """Returns the sorted names of regular files with an allowed extension.

        Raises OSError if the directory cannot be read.
        """
        names = [
            entry.name
            for entry in Path(directory).iterdir()
            if entry.is_file() and self.has_allowed_extension(entry.name)
        ]
        names.sort()
        self.logger.debug(f"Scanned {directory}: {len(names)} video file(s)")
        return names
