"""Framework error codes and their human-readable messages."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes shared by the framework's modules and command interface."""

    OK = 0

    # Command input shape
    SYNTAX = 1
    ARGFEW = 2
    ARGMANY = 3
    BADOPT = 4

    # Parsing and validation
    PARSE = 5
    INVAL = 6
    RANGE = 7
    NULLPTR = 8

    # State and readiness
    BADSTATE = 9
    NOTREADY = 10

    # Resources and timing
    NOMEM = 11
    BUSY = 12
    TIMEOUT = 13
    UNAVAIL = 14

    # Lookup and existence
    NOTFOUND = 15
    EXISTS = 16

    # Implementation
    NOSUP = 17
    NOIMPL = 18

    # Execution and control
    FAILED = 19
    CANCELED = 20
    PERMISSION = 21

    # Data integrity
    DATALOSS = 22
    OVERFLOW = 23
    UNDERFLOW = 24

    # Unexpected internal error
    INTERNAL = 25
    UNKNOWN = 26


_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.OK: "OK",
    ErrorCode.SYNTAX: "Syntax error",
    ErrorCode.ARGFEW: "Too few args",
    ErrorCode.ARGMANY: "Too many args",
    ErrorCode.BADOPT: "Bad option",
    ErrorCode.PARSE: "Parse error",
    ErrorCode.INVAL: "Invalid argument",
    ErrorCode.RANGE: "Out of range",
    ErrorCode.NULLPTR: "Null pointer",
    ErrorCode.BADSTATE: "Bad state",
    ErrorCode.NOTREADY: "Not ready",
    ErrorCode.NOMEM: "Out of memory",
    ErrorCode.TIMEOUT: "Timeout",
    ErrorCode.UNAVAIL: "Unavailable",
    ErrorCode.NOTFOUND: "Not found",
    ErrorCode.EXISTS: "Already exists",
    ErrorCode.NOSUP: "Not supported",
    ErrorCode.NOIMPL: "Not implemented",
    ErrorCode.FAILED: "Execution failed",
    ErrorCode.CANCELED: "Canceled",
    ErrorCode.PERMISSION: "Permission denied",
    ErrorCode.DATALOSS: "Data loss",
    ErrorCode.OVERFLOW: "Overflow",
    ErrorCode.UNDERFLOW: "Underflow",
    ErrorCode.INTERNAL: "Internal error",
    ErrorCode.UNKNOWN: "Unknown error",
}


def error_message(code: ErrorCode | int) -> str | None:
    """Return the message for ``code``.

    Values outside the known codes give the message of ``ErrorCode.UNKNOWN``.
    ``ErrorCode.BUSY`` has no message of its own and gives None.
    """
    try:
        member = ErrorCode(code)
    except ValueError:
        return _MESSAGES[ErrorCode.UNKNOWN]
    return _MESSAGES.get(member)