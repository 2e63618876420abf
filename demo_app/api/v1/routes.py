"""
API v1 routes.

JSON mirrors of the gRPC methods, backed by the same domain services.
"""

from fastapi import APIRouter, Depends

from demo_app.api.dependencies import get_greeting_service, get_summation_service
from demo_app.api.models import HelloRequest, HelloResponse, SumRequest, SumResponse
from demo_app.domain import GreetingService, SummationService

router = APIRouter(tags=["v1"])


@router.post(
    "/hello",
    response_model=HelloResponse,
    responses={422: {"description": "Validation error"}},
    summary="Greet a name",
    description="Returns 'Hello <name>!', or 'Hello Anonymous!' when no name is given. "
    "Mirrors the demo.Hello/SayHello RPC.",
)
async def say_hello(
    request_data: HelloRequest,
    service: GreetingService = Depends(get_greeting_service),
) -> HelloResponse:
    """
    Greet the given name.

    - **name**: Optional name; omitted or null greets "Anonymous"
    """
    return HelloResponse(message=service.greet(request_data.name))


@router.post(
    "/sum",
    response_model=SumResponse,
    responses={422: {"description": "Validation error"}},
    summary="Add two integers",
    description="Returns the arithmetic sum of both arguments. Mirrors the demo.SumService/Sum RPC.",
)
async def sum_integers(
    request_data: SumRequest,
    service: SummationService = Depends(get_summation_service),
) -> SumResponse:
    """
    Add two integers.

    - **arg_one**: First addend
    - **arg_two**: Second addend
    """
    return SumResponse(result=service.add(request_data.arg_one, request_data.arg_two))
