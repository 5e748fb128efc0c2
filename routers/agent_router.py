from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from core.dependencies import get_agent_service
from core.errors import BriefValidationError
from core.logger import get_logger
from core.schemas import AgentResponse, ErrorResponse, ValidationErrorResponse
from services.agent_service import AgentService
from services.sample_plan import get_sample_response

logger = get_logger(__name__)

router = APIRouter()


def _invalid_payload(issues: dict) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": "Invalid payload", "issues": issues})


@router.post(
    "",
    response_model=AgentResponse,
    responses={400: {"model": ValidationErrorResponse}, 500: {"model": ErrorResponse}},
)
async def run_agent(request: Request, service: AgentService = Depends(get_agent_service)):
    # body is read raw so brief violations come back as 400 with every issue listed
    try:
        payload = await request.json()
    except ValueError as e:
        logger.info(f"Rejected request body that is not JSON: {e}")
        return _invalid_payload({"formErrors": ["Request body must be valid JSON"], "fieldErrors": {}})

    try:
        return await service.run(payload)
    except BriefValidationError as e:
        return _invalid_payload(e.issues)
    except Exception as e:
        logger.error(f"Agent API failure: {str(e)}", exc_info=True)
        try:
            return get_sample_response()
        except Exception as fallback_error:
            logger.error(f"Fallback response failure: {str(fallback_error)}", exc_info=True)
            return JSONResponse(status_code=500, content={"error": "Agent unavailable"})


@router.get("/sample", response_model=AgentResponse)
async def sample_plan() -> AgentResponse:
    return get_sample_response()
