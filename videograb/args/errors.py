"""
Error kinds for videograb argument validation

Each kind carries the message shown to the user when the check fails.
"""

from enum import Enum


class CliError(Enum):
    """Outcome kinds of the argument validation chain"""

    # Not a real error: show help and exit cleanly
    GRACEFULLY_STOP = " "

    MISSING_REQUIRED_ARG = (
        "You must specify a URLs source.\n"
        "Valid options are --videoUrls or --videoUrlsFile."
    )

    VIDEOURLS_ARG_CONFLICT = (
        "Too many URLs sources specified!\n"
        "Please specify a single URLs source with either --videoUrls or --videoUrlsFile."
    )

    FILE_INPUT_VIDEOURLS_ARG = (
        "Wrong input for option --videoUrls.\n"
        "To read URLs from file, use --videoUrlsFile option."
    )

    INPUT_URLS_FILE_NOT_FOUND = "Input URL list file not found."

    @property
    def message(self) -> str:
        return self.value

    @property
    def is_error(self) -> bool:
        """False only for the graceful stop kind"""
        return self is not CliError.GRACEFULLY_STOP


class GracefulStop(Exception):
    """Raised when the invocation only asks for help"""

    def __init__(self):
        super().__init__(CliError.GRACEFULLY_STOP.message)
        self.kind = CliError.GRACEFULLY_STOP


class ArgumentError(Exception):
    """Raised when the command line fails validation"""

    def __init__(self, kind: CliError):
        super().__init__(kind.message)
        self.kind = kind

    @classmethod
    def from_kind(cls, kind: CliError) -> Exception:
        """Build the exception matching a validation outcome"""
        if not kind.is_error:
            return GracefulStop()
        return cls(kind)
