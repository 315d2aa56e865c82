from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Union


@dataclass(frozen=True)
class Transaction:
    title: str
    description: str
    price: Union[int, float]
    date_of_sale: datetime
    sold: bool
    category: str
    id: Optional[int] = None
    image: Optional[str] = None

    @property
    def sale_month(self) -> str:
        """Two-digit month of the sale date, e.g. '03'."""
        return f"{self.date_of_sale.month:02d}"

    @property
    def price_text(self) -> str:
        """Price as it reads in the dataset: 1000 rather than 1000.0."""
        if isinstance(self.price, float) and self.price.is_integer():
            return str(int(self.price))
        return str(self.price)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "price": self.price,
            "description": self.description,
            "category": self.category,
            "image": self.image,
            "sold": self.sold,
            "dateOfSale": self.date_of_sale.isoformat(),
        }
