import asyncio
import logging
from typing import Any, Mapping, Optional
from core.config import settings
from core.errors import InputValidationError, NetworkError
from schemas.generate import BuildParams
from services import ces_client
from services.input_service import get_missing_fields, validate_build_params
from services.request_builder import (
    assemble_request_body,
    assemble_request_url,
    convert_object_to_json,
)
from services.response_handler import interpret

logger = logging.getLogger(__name__)


async def run_generate(
    inputs: Mapping[str, str],
    build_params: Optional[BuildParams],
    timeout: Optional[float] = None,
) -> Any:
    """
    Validates the build parameters, sends one generate-await request and
    returns the CES response when every task generated successfully.
    """
    if not validate_build_params(build_params):
        missing_fields = get_missing_fields(build_params) if build_params is not None else []
        raise InputValidationError(missing_fields)

    request_url = assemble_request_url(inputs.get("ces_url", ""), inputs.get("srid", ""), build_params)
    request_body = assemble_request_body(
        inputs.get("runtime_configuration"),
        inputs.get("change_type"),
        inputs.get("execution_status"),
        inputs.get("auto_deploy"),
    )
    body_text = convert_object_to_json(request_body)

    if timeout is None:
        timeout = settings.GENERATE_TIMEOUT_SECONDS
    request = ces_client.dispatch(request_url, inputs.get("ces_token", ""), body_text)
    try:
        if timeout and timeout > 0:
            response_body = await asyncio.wait_for(request, timeout=timeout)
        else:
            response_body = await request
    except asyncio.TimeoutError as e:
        logger.error("Generate request did not complete within %s seconds.", timeout)
        raise NetworkError(f"The generate request timed out after {timeout} seconds.") from e

    return interpret(response_body).unwrap()
