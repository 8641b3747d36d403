"""Builds the CES generate-await URL and request body."""

import json
import logging
from typing import Any, Optional
import httpx
from core.errors import MalformedUrlError
from schemas.generate import BuildParams
from services.input_service import parse_bool_input, string_has_content

logger = logging.getLogger(__name__)


def _truncate_at_last(url: str, segment: str) -> str:
    index = url.lower().rfind(segment)
    if index > 0:
        url = url[:index]
    return url


def normalize_ces_url(ces_url: str) -> str:
    """
    Strips a trailing '/compuware' and '/ispw' (any case) and a trailing
    slash, so that a bare host, '.../compuware' and '.../compuware/ispw'
    all resolve to the same base.
    """
    ces_url = _truncate_at_last(ces_url, "/compuware")
    ces_url = _truncate_at_last(ces_url, "/ispw")
    if ces_url.endswith("/"):
        ces_url = ces_url[:-1]
    return ces_url


def assemble_request_url(ces_url: str, srid: str, build_params: BuildParams) -> httpx.URL:
    base_url = normalize_ces_url(ces_url)

    url_str = f"{base_url}/ispw/{srid}/assignments/{build_params.container_id}/taskIds/generate-await?"
    for task_id in build_params.task_ids:
        url_str += f"taskId={task_id}&"
    url_str += f"level={build_params.task_level}"

    try:
        url = httpx.URL(url_str)
    except httpx.InvalidURL as e:
        logger.error("Assembled request URL is invalid: %s", e)
        raise MalformedUrlError(f"Invalid URL: {url_str}") from e
    if url.scheme not in ("http", "https") or not url.host:
        logger.error("Assembled request URL has no usable scheme or host: %s", url_str)
        raise MalformedUrlError(f"Invalid URL: {url_str}")
    # httpx percent-encodes illegal host characters instead of rejecting them
    if "%" in url.raw_host.decode("ascii"):
        logger.error("Assembled request URL has an invalid host: %s", url_str)
        raise MalformedUrlError(f"Invalid URL: {url_str}")
    if url.port is not None and not 0 <= url.port <= 65535:
        logger.error("Assembled request URL has an invalid port: %s", url_str)
        raise MalformedUrlError(f"Invalid URL: {url_str}")
    return url


def assemble_request_body(
    runtime_config: Optional[str],
    change_type: Optional[str],
    execution_status: Optional[str],
    auto_deploy: Optional[str],
) -> dict[str, Any]:
    request_body = {}
    if string_has_content(runtime_config):
        request_body["runtimeConfig"] = runtime_config
    if string_has_content(change_type):
        request_body["changeType"] = change_type
    if string_has_content(execution_status):
        request_body["execStat"] = execution_status
    request_body["autoDeploy"] = parse_bool_input(auto_deploy)
    return request_body


def convert_object_to_json(data: Any) -> str:
    """Serializes data as compact JSON; None becomes an empty string."""
    if data is None:
        return ""
    return json.dumps(data, separators=(",", ":"))
