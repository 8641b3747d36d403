import logging
from fastapi import APIRouter, HTTPException
from core.errors import ErrorKind, GenerateError
from schemas.generate import GenerateRequest
from services.generate_service import run_generate
from services.input_service import get_build_params

logger = logging.getLogger(__name__)
router = APIRouter()

ERROR_STATUS_CODES = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.PARSE: 400,
    ErrorKind.MALFORMED_URL: 400,
    ErrorKind.NETWORK: 502,
    ErrorKind.GENERATE_FAILURE: 422,
}


@router.get("/")
def read_root():
    return {"message": "ISPW Generate service is running."}


@router.post("/generate", response_model=dict)
async def generate_endpoint(request: GenerateRequest):
    """
    Triggers a generate on CES for the requested tasks and waits for the
    result.
    """
    inputs = request.model_dump(exclude={"build_params"})
    logger.info("Received request to GENERATE on SRID %s", request.srid)
    try:
        build_params = request.build_params
        if build_params is None:
            build_params = get_build_params(inputs)
        return await run_generate(inputs, build_params)
    except GenerateError as e:
        logger.error("Generate failed (%s): %s", e.kind.value, e.message)
        raise HTTPException(status_code=ERROR_STATUS_CODES[e.kind], detail=e.message)
