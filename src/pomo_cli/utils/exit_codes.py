"""
Exit codes for Pomo CLI.

Data and I/O failures reuse the BSD sysexits values.
"""

# Success (normal completion or user quit)
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments, e.g. a malformed --time
ERROR_INVALID_ARGS = 2

# Session log could not be serialized (EX_DATAERR)
ERROR_SERIALIZATION = 65

# Terminal read/write/flush failed (EX_IOERR)
ERROR_IO = 74


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_SERIALIZATION: "ERROR_SERIALIZATION",
        ERROR_IO: "ERROR_IO",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Session ended normally",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
        ERROR_SERIALIZATION: "The session log could not be encoded",
        ERROR_IO: "Terminal input/output failed",
    }
    return descriptions.get(code, "Unknown error")
