"""Domain repository interfaces.

All abstractions are defined here with abc.ABC and @abstractmethod.
Concrete implementations live in catalog/infrastructure/persistence/ and are
wired at the application boundary via dependency injection.
"""

from .base import LifecycleRepository, UniqueLookup
from .brand import BrandRepository
from .example import ExampleRepository

__all__ = [
    "LifecycleRepository",
    "UniqueLookup",
    "BrandRepository",
    "ExampleRepository",
]
