"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Orchestrates domain services for one request/response exchange."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
