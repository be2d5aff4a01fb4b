"""Repository interfaces for linkbio domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from linkbio.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
]
