"""Documented exit codes for the bodecalc CLI.

Exit codes follow UNIX conventions:
- 0: Success
- 1: General/unspecified error
- 2: Invalid command-line arguments or usage
- 3-4: Application-specific outcomes

These codes let shell scripts distinguish "no transfer function" from a
failed run without parsing stderr output.

Usage:
    from bodecalc.util.exit_codes import ExitCode
    sys.exit(ExitCode.NO_DATA)
"""

from __future__ import annotations


class ExitCode:
    """Exit code constants for bodecalc processes.

    Attributes:
        SUCCESS: Normal termination, response computed.
        GENERAL_ERROR: Unspecified runtime error.
        INVALID_ARGS: Command-line argument validation failed.
        NO_DATA: Numerator or denominator parsed to no coefficients.
        OUTPUT_ERROR: The output file could not be written.
    """

    SUCCESS: int = 0
    GENERAL_ERROR: int = 1
    INVALID_ARGS: int = 2
    NO_DATA: int = 3
    OUTPUT_ERROR: int = 4

    @classmethod
    def message(cls, code: int) -> str:
        """Return a human-readable message for an exit code."""
        messages = {
            cls.SUCCESS: "Success",
            cls.GENERAL_ERROR: "General error",
            cls.INVALID_ARGS: "Invalid arguments",
            cls.NO_DATA: "No transfer function available",
            cls.OUTPUT_ERROR: "Output could not be written",
        }
        return messages.get(code, f"Unknown exit code {code}")
