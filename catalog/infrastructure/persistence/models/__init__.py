"""ORM models package.

Importing this package registers every mapper with Base.metadata.
"""

from .resources import Brand, Example, LifecycleColumns

__all__ = ["LifecycleColumns", "Brand", "Example"]
