"""Domain repository interfaces.

Abstractions are defined with abc.ABC and @abstractmethod.  The concrete
implementation lives in gord/infrastructure/persistence/.
"""

from .base import CRUDRepository, Repository

__all__ = [
    "CRUDRepository",
    "Repository",
]
