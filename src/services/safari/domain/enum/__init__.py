from .car_state import CarState
from .car_type import CarType
from .destination import Destination

__all__ = ["CarType", "CarState", "Destination"]
