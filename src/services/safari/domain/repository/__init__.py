from .trip_catalog_repository import TripCatalogRepository

__all__ = ["TripCatalogRepository"]
