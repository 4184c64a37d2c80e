from .exceptions import (
    BusinessRuleViolationException,
    CatalogUnavailableException,
    DomainException,
    PersistenceException,
    ResourceNotFoundException,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "PersistenceException",
    "CatalogUnavailableException",
]
