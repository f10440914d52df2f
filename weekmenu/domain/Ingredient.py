"""Ingredient domain entity: name, per-portion quantity, unit of measure."""
from typing import Tuple


class Ingredient:
    def __init__(self, name: str = "", quantity: float = 0, unit: str = ""):
        self.name = name
        self.quantity = quantity
        self.unit = unit

    @property
    def key(self) -> Tuple[str, str]:
        '''Aggregation identity: exact (name, unit) pair, no unit conversion.'''
        return (self.name, self.unit)

    def scaled(self, factor: int) -> "Ingredient":
        '''Returns a copy with the quantity multiplied by factor.'''
        return Ingredient(self.name, self.quantity * factor, self.unit)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return (self.name, self.quantity, self.unit) == (other.name, other.quantity, other.unit)

    def __str__(self) -> str:
        return f"{self.name} - {self.quantity} {self.unit}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return Ingredient(
            name=d.get("name", ""),
            quantity=d.get("quantity", 0),
            unit=d.get("unit", ""),
        )

    def to_dict(self):
        return {"name": self.name, "quantity": self.quantity, "unit": self.unit}
