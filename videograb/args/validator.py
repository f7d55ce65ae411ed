"""
Argument validation module for videograb

Runs the ordered chain of checks over the parsed command line and folds the
two URL source options (--videoUrls, --videoUrlsFile) into one.

ORDER IS IMPORTANT: every check assumes the previous ones passed.
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from .errors import CliError
from .path_manager import URLS_FILE_EXTENSION, PathManager

CheckResult = Tuple[bool, Optional[CliError]]
Check = Callable[..., CheckResult]


class ArgumentValidator:
    """Validates and normalizes command-line arguments"""

    @staticmethod
    def has_no_args(argv: Sequence[str]) -> bool:
        return len(argv) == 0

    @classmethod
    def check_show_help_request(cls, args, argv: Sequence[str]) -> CheckResult:
        """Stop gracefully when the program is run without arguments"""
        if cls.has_no_args(argv):
            return False, CliError.GRACEFULLY_STOP

        return True, None

    @classmethod
    def check_required_argument(cls, args, argv: Sequence[str]) -> CheckResult:
        """
        Require a URLs source

        An empty --videoUrls list still counts as given here; it is rejected
        by check_video_urls_input.
        """
        if cls.has_no_args(argv):
            return True, None

        if getattr(args, "video_urls", None) is None and not getattr(args, "video_urls_file", None):
            return False, CliError.MISSING_REQUIRED_ARG

        return True, None

    @classmethod
    def check_video_urls_arg_conflict(cls, args, argv: Sequence[str]) -> CheckResult:
        """Reject --videoUrls together with --videoUrlsFile"""
        if cls.has_no_args(argv):
            return True, None

        if getattr(args, "video_urls", None) is not None and getattr(args, "video_urls_file", None):
            return False, CliError.VIDEOURLS_ARG_CONFLICT

        return True, None

    @classmethod
    def check_video_urls_input(cls, args, argv: Sequence[str]) -> CheckResult:
        """
        Validate the shape of the --videoUrls list

        Returns:
            Tuple of (is_valid, error_kind)
        """
        video_urls = getattr(args, "video_urls", None)
        if cls.has_no_args(argv) or video_urls is None:
            return True, None

        if not video_urls:
            return False, CliError.MISSING_REQUIRED_ARG

        # Looks like a file path passed to the wrong option
        if video_urls[0][-4:] == URLS_FILE_EXTENSION:
            return False, CliError.FILE_INPUT_VIDEOURLS_ARG

        return True, None

    @classmethod
    def fix_urls_file_extension(cls, args, argv: Sequence[str]) -> CheckResult:
        """
        Locate the --videoUrlsFile path, appending .txt when only that exists

        Rewrites args.video_urls_file in place.
        """
        urls_file = getattr(args, "video_urls_file", None)
        if cls.has_no_args(argv) or not urls_file:
            return True, None

        resolved = PathManager.resolve_urls_file(urls_file)
        if resolved is None:
            return False, CliError.INPUT_URLS_FILE_NOT_FOUND

        args.video_urls_file = resolved
        return True, None

    @staticmethod
    def merge_video_urls_arguments(args, argv: Sequence[str] = ()) -> CheckResult:
        """
        Fold --videoUrlsFile into --videoUrls

        Both options feed the same download path, so downstream code only ever
        sees args.video_urls. Safe to run on an already merged namespace.
        """
        if not getattr(args, "video_urls_file", None):
            if hasattr(args, "video_urls_file"):
                del args.video_urls_file
            return True, None

        args.video_urls = [args.video_urls_file]
        del args.video_urls_file

        return True, None

    @classmethod
    def get_checks(cls) -> List[Check]:
        """The validation chain, in execution order"""
        return [
            cls.check_show_help_request,
            cls.check_required_argument,
            cls.check_video_urls_arg_conflict,
            cls.check_video_urls_input,
            cls.fix_urls_file_extension,
            cls.merge_video_urls_arguments,
        ]

    @classmethod
    def run_checks(cls, args, argv: Sequence[str]) -> CheckResult:
        """
        Run the chain, stopping at the first failing check

        Args:
            args: Parsed arguments object, normalized in place on success
            argv: Raw command line tokens (without the program name)

        Returns:
            Tuple of (is_valid, error_kind)
        """
        logger = logging.getLogger(__name__)

        for check in cls.get_checks():
            valid, error = check(args, argv)
            logger.debug("Argument check %s: %s", check.__name__, "ok" if valid else error.name)
            if not valid:
                return False, error

        return True, None
