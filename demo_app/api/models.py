"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
They mirror the protobuf messages of the gRPC services.
"""

from pydantic import BaseModel, Field, StrictInt

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class HelloRequest(BaseModel):
    """Request model for the greeting endpoint."""

    name: str | None = Field(
        default=None,
        description="Name to greet; omitted or null greets 'Anonymous'",
    )


class HelloResponse(BaseModel):
    """Response model for the greeting endpoint."""

    message: str


class SumRequest(BaseModel):
    """Request model for the sum endpoint (int32 arguments, like SumRequest in sum.proto)."""

    arg_one: StrictInt = Field(..., ge=INT32_MIN, le=INT32_MAX, description="First addend")
    arg_two: StrictInt = Field(..., ge=INT32_MIN, le=INT32_MAX, description="Second addend")


class SumResponse(BaseModel):
    """Response model for the sum endpoint."""

    result: int
