from dataclasses import dataclass

from size_allocator.input_parser import to_quantity


@dataclass(frozen=True)
class Category:
    """
    One allocation unit (e.g. a garment size).

    ``label`` is carried through for display only; ``weight`` (historical
    sales) and ``available`` (current stock) drive the allocation.
    """
    label: str
    weight: float = 0.0
    available: float = 0.0

    @classmethod
    def from_raw(cls, label, weight="", available="") -> "Category":
        """Build a category from raw form values, coercing bad numbers to 0."""
        return cls(
            label="" if label is None else str(label).strip(),
            weight=to_quantity(weight),
            available=to_quantity(available),
        )
