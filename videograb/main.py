#!/usr/bin/env python3
"""
videograb - Video downloader command line front end

Validates the command line and resolves the URLs handed to the downloader.
"""

import logging
import sys

from .args import ArgumentParser
from .urls import resolve_video_urls

# Package version
from . import __version__


def setup_logging(logging_config: dict):
    """Setup console logging on stderr"""
    if logging_config["level"] == "debug":
        level = logging.DEBUG
    else:  # default
        level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    formatter = logging.Formatter("%(levelname)s: %(message)s")
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    return console_handler


def log_options_summary(args):
    """Log the options passed through to the downloader"""
    logging.debug("Options:")
    logging.debug("  Username: %s", args.username or "(none)")
    logging.debug("  Output directory: %s", args.output_directory)
    logging.debug("  Thumbnails: %s", "disabled" if args.no_thumbnails else "enabled")
    logging.debug("  Simulate: %s", args.simulate)


def main(argv=None):
    """Main application entry point"""
    arg_parser = ArgumentParser()
    args = arg_parser.parse_args(argv)

    logging_config = arg_parser.get_logging_config(args)
    setup_logging(logging_config)

    logging.debug("videograb %s", __version__)
    log_options_summary(args)

    try:
        urls = resolve_video_urls(args.video_urls)
    except OSError as e:
        logging.error("Cannot read URL list file %s: %s", args.video_urls[0], e)
        return 1

    for url in urls:
        logging.debug("  URL: %s", url)
    logging.info("%d video URL(s) to process", len(urls))

    if args.simulate:
        for url in urls:
            print(url)
        return 0

    logging.info("Videos will be saved to: %s", args.output_directory)
    return 0


if __name__ == "__main__":
    sys.exit(main())
