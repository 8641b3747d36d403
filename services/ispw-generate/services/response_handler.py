"""Response Interpreter for the generate-await call."""

import logging
from typing import Any, Optional
from schemas.generate import GenerateResponse, GenerateResult

logger = logging.getLogger(__name__)

NO_RESPONSE_MESSAGE = "No response was received from the generate request."
INCOMPLETE_MESSAGE = "The generate did not complete successfully."
FAILURES_MESSAGE = "There were generate failures."


def get_status_message_to_print(status_msg: Any) -> str:
    """
    The statusMsg may be a single string or a list of lines. A list is
    joined with a newline after every entry.
    """
    if isinstance(status_msg, str):
        return status_msg
    if isinstance(status_msg, list):
        return "".join(f"{line}\n" for line in status_msg)
    return ""


def _has_failures(failed_count: Any) -> bool:
    # bool is an int subclass; only a real numeric zero counts as success
    return isinstance(failed_count, bool) or failed_count != 0


def interpret(response_body: Optional[GenerateResponse]) -> GenerateResult:
    """
    Classifies the parsed response body. Status lines are logged on the way;
    the outcome is returned as a GenerateResult instead of being raised.
    """
    if response_body is None:
        return GenerateResult.failure(NO_RESPONSE_MESSAGE)

    await_status = response_body.get("awaitStatus") if isinstance(response_body, dict) else None
    if await_status is None:
        message = response_body.get("message") if isinstance(response_body, dict) else None
        if message:
            logger.info(message)
        return GenerateResult.failure(INCOMPLETE_MESSAGE)

    if not isinstance(await_status, dict):
        await_status = {}
    if _has_failures(await_status.get("generateFailedCount")):
        logger.error(get_status_message_to_print(await_status.get("statusMsg")))
        return GenerateResult.failure(FAILURES_MESSAGE)

    logger.info(get_status_message_to_print(await_status.get("statusMsg")))
    return GenerateResult.success(response_body)


def handle_response_body(response_body: Any) -> Any:
    """Returns the response body on success, raises GenerateFailureException otherwise."""
    return interpret(response_body).unwrap()
