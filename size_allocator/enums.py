from enum import Enum


class OrderMode(Enum):
    """How a total order is spread across product variants."""
    SINGLE = "Single product"
    DUAL = "Boat neck + V-neck"


class Variant(Enum):
    """Product variant a size run belongs to."""
    PRODUCT = "Product"        # single-product mode
    BOAT_NECK = "Boat neck"    # primary variant in dual mode
    V_NECK = "V-neck"          # secondary variant in dual mode
