"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services.

    Use cases accept raw identifiers from the interface layer, convert them
    to domain types and shape domain results into response models.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
