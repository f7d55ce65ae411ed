"""
Path management module for videograb

Handles lookup of the URL list file given with --videoUrlsFile, including
recovery of a missing .txt extension (Windows hides known extensions, so
users often type the name without it).
"""

import logging
from pathlib import Path
from typing import Optional

URLS_FILE_EXTENSION = ".txt"


class PathManager:
    """Resolves user supplied paths on the filesystem"""

    @staticmethod
    def exists(path: str) -> bool:
        """Read-only existence check, False for paths the OS rejects"""
        try:
            return Path(path).exists()
        except OSError:
            return False

    @classmethod
    def resolve_urls_file(cls, path: str) -> Optional[str]:
        """
        Locate the URL list file

        Args:
            path: Path as typed on the command line

        Returns:
            The path as given if it exists, the path with .txt appended if
            only that exists, None otherwise
        """
        if cls.exists(path):
            return path

        candidate = path + URLS_FILE_EXTENSION
        if cls.exists(candidate):
            logging.getLogger(__name__).info(
                "URL list file %s not found, using %s", path, candidate
            )
            return candidate

        return None
