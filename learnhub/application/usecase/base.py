"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One application operation: a request model in, a response model out.

    Routes build the request from the HTTP call and the authenticated user;
    use cases parse ids and call domain services.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
