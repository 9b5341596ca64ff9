from typing import Iterable, Optional

import attrs


@attrs.define
class SeatCategoryEntity:
    """Price tier a seat points at through ``SeatPricing.category``."""

    id: str
    name: str
    color: str
    base_price: float
    price_modifier: float = 1.0
    is_accessible: bool = False
    is_premium: bool = False
    sort_order: int = 0
    description: Optional[str] = None

    @property
    def effective_price(self) -> float:
        return max(0.0, self.base_price * self.price_modifier)

    @staticmethod
    def ordered(categories: Iterable['SeatCategoryEntity']) -> list['SeatCategoryEntity']:
        return sorted(categories, key=lambda c: (c.sort_order, c.name))
