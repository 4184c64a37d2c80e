from .seats_reserved import SeatsReserved

__all__ = ["SeatsReserved"]
