"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One caller-facing operation.

    Requests carry the acting user's id explicitly; use cases hold only
    their injected services.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
