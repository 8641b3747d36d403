"""Entry point when the generate runs as a CI action step."""

import asyncio
import json
import logging
import sys
from typing import Any, Mapping, Optional
from core.config import settings
from core.errors import GenerateError
from core.logging_config import setup_logging
from services.generate_service import run_generate
from services.input_service import ACTION_INPUTS, get_build_params, retrieve_inputs

logger = logging.getLogger(__name__)


def write_output(name: str, value: str, output_path: Optional[str] = None):
    output_path = output_path or settings.GITHUB_OUTPUT
    if not output_path:
        return
    with open(output_path, "a", encoding="utf-8") as output_file:
        output_file.write(f"{name}={value}\n")


async def run_action(provider: Optional[Mapping[str, str]] = None) -> Any:
    inputs = retrieve_inputs(ACTION_INPUTS, provider)
    build_params = get_build_params(inputs)
    response_body = await run_generate(inputs, build_params)
    write_output("generate_status", json.dumps(response_body))
    return response_body


def main(provider: Optional[Mapping[str, str]] = None) -> int:
    setup_logging()
    try:
        asyncio.run(run_action(provider))
    except GenerateError as e:
        # picked up by the runner as a failure annotation
        print(f"::error::{e.message}")
        logger.error("Generate action failed: %s", e.message)
        return 1
    logger.info("Generate completed successfully.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
