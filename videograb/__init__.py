"""
videograb - Video downloader command line front end

Parses and validates the command line of the downloader and resolves the
list of video URLs to fetch.
"""

__version__ = "1.0.0"
__license__ = "GPL-3.0"

from .args import ArgumentParser, ArgumentValidator, ArgumentError, CliError, GracefulStop
from .urls import resolve_video_urls

__all__ = [
    "ArgumentParser",
    "ArgumentValidator",
    "ArgumentError",
    "CliError",
    "GracefulStop",
    "resolve_video_urls",
]
