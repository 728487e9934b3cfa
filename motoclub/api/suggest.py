"""Product suggestion endpoint.

Spam drops answer exactly like real submissions so automated clients
cannot tell which check caught them.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from motoclub.api.dependencies import get_gate
from motoclub.api.middleware import client_address
from motoclub.api.schemas import SuggestionBody, SuggestionError, SuggestionSuccess
from motoclub.suggestions import Outcome, SubmissionGate, SuggestionRequest

router = APIRouter(prefix="/api", tags=["Suggestions"])

OUTCOME_STATUS = {
    Outcome.ACCEPTED: status.HTTP_200_OK,
    Outcome.SILENT_ACCEPT: status.HTTP_200_OK,
    Outcome.INVALID: status.HTTP_400_BAD_REQUEST,
    Outcome.RATE_LIMITED: status.HTTP_429_TOO_MANY_REQUESTS,
    Outcome.WRITE_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


async def read_suggestion_body(request: Request) -> SuggestionBody:
    """Parse the request body without rejecting it.

    Args:
        request: Incoming request.

    Returns:
        Submission fields; empty when the body is not a JSON object.
    """
    try:
        payload: Any = await request.json()
    except ValueError:
        payload = {}
    if not isinstance(payload, dict):
        payload = {}
    return SuggestionBody.model_validate(payload)


@router.post(
    "/suggest",
    response_model=SuggestionSuccess,
    responses={
        400: {"model": SuggestionError},
        429: {"model": SuggestionError},
        500: {"model": SuggestionError},
    },
    openapi_extra={
        "requestBody": {
            "content": {
                "application/json": {"schema": SuggestionBody.model_json_schema()}
            },
        },
    },
    summary="Suggest a product",
)
async def suggest_product(
    request: Request,
    gate: Annotated[SubmissionGate, Depends(get_gate)],
) -> JSONResponse:
    """Submit a product URL for the team to review.

    Args:
        request: Incoming request with the form submission as JSON.
        gate: Submission gate.

    Returns:
        {"success": true} or {"error": message} with the matching status.
    """
    body = await read_suggestion_body(request)
    result = await gate.evaluate(
        SuggestionRequest(
            url=body.url,
            client_address=client_address(request),
            honeypot=body.website,
            elapsed_ms=body.elapsed_ms,
        )
    )

    if result.is_success:
        return JSONResponse(content={"success": True})

    return JSONResponse(
        status_code=OUTCOME_STATUS[result.outcome],
        content={"error": result.message},
    )
