"""
videograb.args - Command line argument parsing module

Provides argument parsing, the ordered validation chain and URL source
normalization for the videograb downloader.
"""

from .base import ArgumentParser
from .errors import ArgumentError, CliError, GracefulStop
from .validator import ArgumentValidator
from .path_manager import PathManager

# Primary export
__all__ = [
    "ArgumentParser",      # Main public interface
    "ArgumentValidator",   # For testing/validation
    "ArgumentError",
    "CliError",
    "GracefulStop",
    "PathManager",         # For URL list file lookup
]
