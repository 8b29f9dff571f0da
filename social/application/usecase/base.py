"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services.

    ``execute`` returns a domain result (``Success`` or a failure variant)
    whose success payload is already mapped to a response DTO.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
