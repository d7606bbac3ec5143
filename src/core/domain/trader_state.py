"""
TraderState — Снапшот состояния трейдера

Immutable Pydantic модели для диагностики: inventory, wishlist и баланс.
Полная совместимость с JSON Schema (contracts/schema/trader_state.json).
"""

from pydantic import BaseModel, Field


class ItemRecord(BaseModel):
    """Запись о предмете в снапшоте (с рассчитанной ценой продажи)."""

    name: str = Field(..., min_length=1, description="Название предмета")
    base_price: int | None = Field(None, ge=0, description="Базовая цена")
    selling_price: int | None = Field(
        None, ge=0, description="Цена продажи по стратегии трейдера (None, если отсутствует)"
    )
    attributes: dict[str, int] = Field(
        default_factory=dict, description="Атрибуты категории (например, max_speed)"
    )

    model_config = {"frozen": True}


class TraderState(BaseModel):
    """
    Снапшот трейдера.

    Immutable модель (frozen=True).
    """

    name: str = Field(..., min_length=1, description="Имя трейдера")
    money: int = Field(..., ge=0, description="Баланс (никогда не отрицательный)")
    inventory: list[ItemRecord] = Field(default_factory=list, description="Предметы во владении")
    wishlist: list[ItemRecord] = Field(default_factory=list, description="Желаемые предметы")

    model_config = {"frozen": True}

    def inventory_value(self) -> int:
        """
        Суммарная цена продажи inventory.

        Предметы без цены не учитываются.
        """
        return sum(r.selling_price for r in self.inventory if r.selling_price is not None)
