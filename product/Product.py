# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-12
# Description: Product
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Dict


@dataclass(frozen=True)
class Product:
    """Catalog product. Identity is ``id``."""
    id: int
    name: str
    description: str
    price: Decimal
    image_url: str = ""

    @classmethod
    def empty(cls) -> "Product":
        """Placeholder returned when no product matched."""
        return cls(id=0, name="", description="", price=Decimal("0"), image_url="")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Product":
        """
        Build a Product from a catalog row. Accepts ``imageUrl`` or ``image_url``.
        Price goes through ``str`` so 99.99 stays 99.99 rather than a binary float expansion.
        """
        try:
            price = Decimal(str(data.get("price", "0")))
        except InvalidOperation as e:
            raise ValueError(f"Invalid price for product {data.get('id')!r}: {data.get('price')!r}") from e

        return cls(
            id=int(data["id"]),
            name=str(data.get("name") or ""),
            description=str(data.get("description") or ""),
            price=price,
            image_url=str(data.get("imageUrl") or data.get("image_url") or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": str(self.price),
            "imageUrl": self.image_url,
        }
