from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from typing import Annotated

from .schemas import MessageResponse, SolveRequest, SolveResponse
from .dependencies import get_forwarder
from src.solver.forwarder import RequestForwarder


router = APIRouter(prefix="/api", tags=["Solver"])

# Every method reaches the forwarder so a wrong method gets its own 405 body.
# OPTIONS is listed too: CORS preflights are answered by the middleware, a
# plain OPTIONS request gets the same 405 as any other non-POST method.
ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


@router.api_route(
    "/solve",
    methods=ALL_METHODS,
    openapi_extra={
        "requestBody": {
            "content": {
                "application/json": {"schema": SolveRequest.model_json_schema()}
            }
        }
    },
    responses={
        200: {"model": SolveResponse, "description": "LaTeX solution"},
        405: {"model": MessageResponse, "description": "Only POST is allowed"},
        500: {
            "model": MessageResponse,
            "description": "Configuration or internal error; upstream errors "
                           "come back as a LaTeX `solution` instead"
        },
    },
)
async def solve(
    request: Request,
    forwarder: Annotated[RequestForwarder, Depends(get_forwarder)],
) -> JSONResponse:
    """
    Solve a math problem (text and optional image) via Gemini.
    """
    body = await request.body() if request.method == "POST" else b""
    result = await forwarder.handle(request.method, body)
    return JSONResponse(status_code=result.status_code, content=result.content)
