from .trip_search import CatalogStats, SearchResult, TripSearch, TripSearchCriteria

__all__ = ["CatalogStats", "SearchResult", "TripSearch", "TripSearchCriteria"]
