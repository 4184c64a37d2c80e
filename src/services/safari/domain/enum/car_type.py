from enum import Enum


class CarType(str, Enum):
    """サファリ車両の種類"""

    POP_UP_ROOF_MINIVAN = "pop-up roof minivan"
    POP_UP_ROOF_4X4 = "pop-up roof 4x4 vehicle"
    OPEN_SIDED_4X4 = "open-sided 4x4 vehicle"
