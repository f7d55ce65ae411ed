"""
videograb.urls - Resolution of the normalized URL source

After argument normalization the only URL source is args.video_urls. It holds
either the URLs themselves or a single entry naming the URL list file.
"""

import logging
from pathlib import Path
from typing import List, Sequence


def read_urls_file(path: Path) -> List[str]:
    """
    Read a URL list file

    One URL per line. Blank lines and lines starting with # are skipped.
    """
    urls = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            url = line.strip()
            if not url or url.startswith("#"):
                continue
            urls.append(url)

    logging.debug("Read %d URLs from %s", len(urls), path)
    return urls


def _is_file(path: str) -> bool:
    try:
        return Path(path).is_file()
    except OSError:
        return False


def resolve_video_urls(video_urls: Sequence[str]) -> List[str]:
    """
    Expand normalized video_urls into the list of URLs to download

    Args:
        video_urls: Normalized args.video_urls

    Returns:
        List of URLs

    Raises:
        OSError: the URL list file exists but cannot be read
    """
    if len(video_urls) == 1 and _is_file(video_urls[0]):
        return read_urls_file(Path(video_urls[0]))

    return [url.strip() for url in video_urls if url.strip()]
