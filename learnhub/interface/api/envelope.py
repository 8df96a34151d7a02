"""Success envelope shared by all routes."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """``{"success": true, "data": ...}``"""

    success: bool = True
    data: T


def ok(data: T) -> ApiResponse[T]:
    return ApiResponse(data=data)
