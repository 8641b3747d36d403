"""Error types raised while building, sending and checking a generate request."""

from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    PARSE = "parse"
    MALFORMED_URL = "malformed_url"
    NETWORK = "network"
    GENERATE_FAILURE = "generate_failure"


class GenerateError(Exception):
    """Base class for every failure of a single generate invocation."""

    kind = ErrorKind.GENERATE_FAILURE

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputValidationError(GenerateError):
    kind = ErrorKind.VALIDATION

    def __init__(self, missing_fields: list[str]):
        self.missing_fields = list(missing_fields)
        if self.missing_fields:
            detail = ", ".join(self.missing_fields)
            message = f"Missing required inputs: {detail}."
        else:
            message = "No build parameters were supplied."
        super().__init__(message)


class InputParseError(GenerateError):
    kind = ErrorKind.PARSE


class MalformedUrlError(GenerateError):
    kind = ErrorKind.MALFORMED_URL


class NetworkError(GenerateError):
    kind = ErrorKind.NETWORK


class GenerateFailureException(GenerateError):
    """
    Raised when the generate response is missing, incomplete, or reports
    task failures.
    """

    kind = ErrorKind.GENERATE_FAILURE
