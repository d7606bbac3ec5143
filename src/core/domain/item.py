"""
Item — Модели торгуемых предметов

Immutable Pydantic модели предметов, которыми владеют и обмениваются трейдеры.

Capabilities:
- Tradable: предмет имеет базовую цену (base_price не None)
- Drivable: предмет имеет максимальную скорость (DrivableItem.max_speed)

Предметы сравниваются по значению (frozen модели хешируемы),
поэтому проверка принадлежности inventory/wishlist работает через ==.
"""

from pydantic import BaseModel, Field

from .price import Price


# =============================================================================
# ITEM MODEL
# =============================================================================


class Item(BaseModel):
    """
    Базовый предмет.

    base_price=None означает, что предмет не Tradable:
    его цена отсутствует и продать его нельзя.
    """

    name: str = Field(..., min_length=1, description="Название предмета")
    base_price: int | None = Field(
        None, ge=0, description="Базовая цена (None, если предмет не Tradable)"
    )

    model_config = {"frozen": True}  # Immutable

    @property
    def is_tradable(self) -> bool:
        return self.base_price is not None

    def price(self) -> Price:
        """
        Базовая цена предмета как явный результат.

        Returns:
            Price.of(base_price) или Price.missing()
        """
        if self.base_price is None:
            return Price.missing()
        return Price.of(self.base_price)

    def category_attributes(self) -> dict[str, int]:
        """
        Атрибуты категории (всё, кроме name и base_price).

        Returns:
            dict атрибутов, например {"max_speed": 200} для DrivableItem
        """
        return self.model_dump(exclude={"name", "base_price"})

    def __str__(self) -> str:
        parts = [f"price={self.price()}"]
        parts += [f"{key}={value}" for key, value in self.category_attributes().items()]
        return f"{self.name} ({', '.join(parts)})"


# =============================================================================
# DRIVABLE
# =============================================================================


class DrivableItem(Item):
    """Предмет категории Drivable (транспорт)."""

    max_speed: int = Field(..., ge=0, description="Максимальная скорость")
