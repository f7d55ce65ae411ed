"""
Main argument parser module for videograb

Orchestrates argument parsing, the validation chain and the normalization
of the URL source options.
"""

import argparse
import os
import sys
from typing import Optional, Sequence

from .errors import ArgumentError, GracefulStop
from .validator import ArgumentValidator

DEFAULT_OUTPUT_DIRECTORY = "videos"


class ArgumentParser:
    """Command line argument parser for videograb"""

    def __init__(self):
        self.parser = self._create_parser()
        self.validator = ArgumentValidator()

    def _create_parser(self):
        """Create the argument parser with all options"""
        from .. import __version__

        parser = argparse.ArgumentParser(
            prog="videograb",
            description="Download videos from a list of URLs",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=self._get_epilog_text(),
        )

        parser.add_argument(
            "--version", action="version", version=__version__,
            help="Show version and exit"
        )

        # URL sources, exactly one is required (enforced by the validator)
        parser.add_argument(
            "--videoUrls", "-V",
            dest="video_urls",
            action="extend",
            nargs="*",
            metavar="URL",
            help="List of video urls",
        )

        parser.add_argument(
            "--videoUrlsFile", "-F",
            dest="video_urls_file",
            type=str,
            nargs="?",
            const="",
            metavar="FILE",
            help="Path to txt file containing the urls",
        )

        parser.add_argument(
            "--username", "-u",
            dest="username",
            type=str,
            help="Username used to sign in",
        )

        parser.add_argument(
            "--outputDirectory", "-o",
            dest="output_directory",
            type=str,
            default=self._get_default_output_directory(),
            help="Directory where videos are saved (default: %(default)s)",
        )

        parser.add_argument(
            "--noThumbnails", "-nthumb",
            dest="no_thumbnails",
            action="store_true",
            help="Do not display video thumbnails",
        )

        parser.add_argument(
            "--simulate", "-s",
            dest="simulate",
            action="store_true",
            help="Disable video download and print metadata information to the console",
        )

        parser.add_argument(
            "--verbose", "-v",
            dest="verbose",
            action="store_true",
            help="Print additional information to the console "
                 "(use this before opening an issue)",
        )

        return parser

    @staticmethod
    def _get_default_output_directory() -> str:
        return os.environ.get("VIDEOGRAB_OUTPUT_DIRECTORY") or DEFAULT_OUTPUT_DIRECTORY

    def _get_epilog_text(self):
        """Get the epilog help text"""
        return """
Examples:
  videograb -V "https://example.com/video/1" "https://example.com/video/2"
  videograb -F urls.txt -o downloads
  videograb -F urls                        # urls.txt is used if urls does not exist
  videograb -F urls.txt --simulate --verbose

URL Sources:
  Exactly one of --videoUrls or --videoUrlsFile must be given.
  The URL list file holds one URL per line; blank lines and lines
  starting with # are ignored.

Environment:
  VIDEOGRAB_OUTPUT_DIRECTORY   Default for --outputDirectory
  VIDEOGRAB_VERBOSE            Set to true to always log verbosely
        """

    def validate_and_normalize(self, argv: Optional[Sequence[str]] = None):
        """
        Parse, validate and normalize command line arguments

        Args:
            argv: Command line tokens without the program name
                  (defaults to sys.argv[1:])

        Returns:
            Normalized namespace: only video_urls remains as URL source

        Raises:
            GracefulStop: no arguments were given
            ArgumentError: validation failed
        """
        if argv is None:
            argv = sys.argv[1:]
        argv = list(argv)

        args = self.parser.parse_args(argv)

        valid, error = self.validator.run_checks(args, argv)
        if not valid:
            raise ArgumentError.from_kind(error)

        return args

    def parse_args(self, argv: Optional[Sequence[str]] = None):
        """Parse command line arguments with validation, exiting on failure"""
        try:
            return self.validate_and_normalize(argv)
        except GracefulStop:
            self.parser.print_help()
            sys.exit(0)
        except ArgumentError as e:
            self.parser.error(str(e))

    def get_logging_config(self, args):
        """Determine logging configuration from arguments"""
        config = {
            "level": "default",
        }

        if args.verbose or os.environ.get("VIDEOGRAB_VERBOSE", "false").lower() == "true":
            config["level"] = "debug"

        return config
