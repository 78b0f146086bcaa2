# topmark:header:start
#
#   project      : Boostlook
#   file         : exit_codes.py
#   file_relpath : src/boostlook/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""Exit codes for the Boostlook CLI.

A preview session either ends gracefully (interrupt/terminate signal) or fails
hard: startup validation and external build failures share a single failure
code so wrapper scripts only need to test for non-zero.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Boostlook CLI.

    Attributes:
        SUCCESS: Successful execution, including graceful shutdown via signal.
        FAILURE: Startup validation failure (missing tool, missing input file,
            invalid configuration) or a failed external build.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64  # EX_USAGE
