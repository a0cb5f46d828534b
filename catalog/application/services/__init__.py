"""Application services package.

Exports one service per resource and the get_services() factory for
wiring at the application boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from catalog.application.audit import AuditTrailFactory
from catalog.application.config import LockVersionConfig
from catalog.domain.contracts import Authorizer
from catalog.domain.services.validator import DomainValidator

from .brand import BrandService
from .example import ExampleService
from .lifecycle import LifecycleService

if TYPE_CHECKING:
    from catalog.domain.repositories import BrandRepository, ExampleRepository


@dataclass
class Services:
    """All application services bound to one set of repositories."""

    brands: BrandService
    examples: ExampleService


def get_services(
    brands: BrandRepository,
    examples: ExampleRepository,
    audit: AuditTrailFactory,
    authorizer: Authorizer,
    lock_config: LockVersionConfig | None = None,
) -> Services:
    """Construct every service for one request scope.

        repos = get_repositories(session)
        services = get_services(repos.brands, repos.examples, audit, authorizer)
        brand = await services.brands.view(brand_id)
    """
    validator = DomainValidator()
    return Services(
        brands=BrandService(brands, audit, authorizer, validator, lock_config),
        examples=ExampleService(examples, audit, authorizer, validator, lock_config),
    )


__all__ = [
    "LifecycleService",
    "BrandService",
    "ExampleService",
    "Services",
    "get_services",
]
