# topmark:header:start
#
#   file         : exit_codes.py
#   file_relpath : src/rstextract/cli/exit_codes.py
#   project      : RstExtract
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the RstExtract CLI.

RstExtract aligns with the BSD `sysexits` convention where practical, so that
build scripts can tell a configuration mistake from an unreadable source tree
or an unwritable output directory.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the RstExtract CLI.

    Attributes:
        SUCCESS: Successful execution (also used when no arguments were given
            and only the usage line was printed).
        FAILURE: Generic failure; used when a keep-going run could not write
            one or more documents.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: A source file cannot be decoded or parsed. Mirrors BSD
            ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Source directory does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading sources or writing documents. Mirrors BSD
            ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions (read/write). Mirrors BSD
            ``EX_NOPERM (77)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
