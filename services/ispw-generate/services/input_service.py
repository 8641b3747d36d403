"""Input Normalizer: raw action inputs to validated build parameters."""

import json
import logging
import os
from typing import Any, Iterable, Mapping, Optional
from pydantic import ValidationError
from core.config import settings
from core.errors import InputParseError
from schemas.generate import BuildParamField, BuildParams, REQUIRED_BUILD_PARAM_FIELDS

logger = logging.getLogger(__name__)

ACTION_INPUTS = [
    "ces_url",
    "ces_token",
    "srid",
    "runtime_configuration",
    "change_type",
    "execution_status",
    "auto_deploy",
    "generate_automatically",
    "assignment_id",
    "release_id",
    "level",
    "task_id",
]

MISSING_INPUT_LABELS = {
    BuildParamField.CONTAINER_ID: "an assignment ID",
    BuildParamField.RELEASE_ID: "a release ID",
    BuildParamField.TASK_LEVEL: "a level",
    BuildParamField.TASK_IDS: "a list of task IDs",
}


def _read_env_input(name: str) -> str:
    key = settings.INPUT_ENV_PREFIX + name.replace(" ", "_").upper()
    return os.environ.get(key, "").strip()


def retrieve_inputs(names: Iterable[str], provider: Optional[Mapping[str, str]] = None) -> dict[str, str]:
    """
    Returns every requested input as a string, whether or not the provider
    defines it. Without a provider the action environment (INPUT_<NAME>) is read.
    """
    inputs = {}
    for name in names:
        if provider is None:
            inputs[name] = _read_env_input(name)
        else:
            inputs[name] = provider.get(name) or ""
    return inputs


def string_has_content(value: Any) -> bool:
    return value is not None and len(value) > 0


def parse_as_json(text: Optional[str]) -> Any:
    """Parses text as JSON. Empty text is not an error and yields None."""
    if not string_has_content(text):
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        logger.error("Input is not valid JSON: %s", e)
        raise InputParseError(f"Unable to parse input as JSON: {e.msg}") from e


def parse_bool_input(value: Optional[str]) -> bool:
    """Only the literal string 'true' is true; anything else is false."""
    return value == "true"


def split_task_ids(value: Optional[str]) -> list[str]:
    if not string_has_content(value):
        return []
    return [task_id.strip() for task_id in value.split(",") if task_id.strip()]


def get_missing_input_message(field: BuildParamField) -> str:
    return f"Missing input: {MISSING_INPUT_LABELS[field]} must be specified."


def validate_build_params(
    build_params: Optional[BuildParams],
    required_fields: Iterable[BuildParamField] = REQUIRED_BUILD_PARAM_FIELDS,
) -> bool:
    """
    Checks every required field and logs one diagnostic per missing field.
    Returns False when build_params is absent or any field is empty.
    """
    if build_params is None:
        return False

    is_valid = True
    for field in required_fields:
        if not string_has_content(build_params.get_field(field)):
            is_valid = False
            logger.error(get_missing_input_message(field))
    return is_valid


def get_missing_fields(
    build_params: BuildParams,
    required_fields: Iterable[BuildParamField] = REQUIRED_BUILD_PARAM_FIELDS,
) -> list[str]:
    return [
        field.value
        for field in required_fields
        if not string_has_content(build_params.get_field(field))
    ]


def get_build_params(inputs: Mapping[str, str]) -> Optional[BuildParams]:
    """
    Resolves build parameters from the generate_automatically JSON when it is
    given, otherwise from the individual assignment/release/level/task inputs.
    """
    if string_has_content(inputs.get("generate_automatically")):
        parsed = parse_as_json(inputs["generate_automatically"])
        if parsed is None:
            return None
        if not isinstance(parsed, dict):
            raise InputParseError("generate_automatically must be a JSON object.")
        data = dict(parsed)
        if isinstance(data.get("taskIds"), str):
            data["taskIds"] = split_task_ids(data["taskIds"])
        try:
            return BuildParams.model_validate(data)
        except ValidationError as e:
            logger.error("generate_automatically has an unexpected shape: %s", e)
            raise InputParseError("generate_automatically does not describe valid build parameters.") from e

    manual_inputs = ("assignment_id", "release_id", "level", "task_id")
    if not any(string_has_content(inputs.get(name)) for name in manual_inputs):
        return None

    logger.info("Using the assignment, release, level and task inputs for the build parameters.")
    return BuildParams(
        container_id=inputs.get("assignment_id") or "",
        release_id=inputs.get("release_id") or "",
        task_level=inputs.get("level") or "",
        task_ids=split_task_ids(inputs.get("task_id")),
    )
