"""
Price — Результат расчёта цены продажи

Явный тип результата вместо магической константы MISSING_PRICE:
цена либо присутствует (целое неотрицательное число), либо отсутствует
(предмет не имеет базовой цены и не может быть продан).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Price:
    """
    Цена предмета.

    Immutable (frozen=True). Создаётся только через Price.of() / Price.missing().
    """

    amount: int | None = None

    @classmethod
    def of(cls, amount: int) -> "Price":
        """
        Присутствующая цена.

        Args:
            amount: Цена (>= 0)

        Returns:
            Price с заданным amount

        Raises:
            ValueError: Если цена отрицательная
        """
        if amount < 0:
            raise ValueError(f"price amount {amount} must be non-negative")
        return cls(amount=amount)

    @classmethod
    def missing(cls) -> "Price":
        """Отсутствующая цена (предмет нельзя оценить)."""
        return cls(amount=None)

    @property
    def is_missing(self) -> bool:
        return self.amount is None

    def plus(self, surcharge: int) -> "Price":
        """
        Надбавка к цене.

        Отсутствующая цена остаётся отсутствующей.

        Args:
            surcharge: Надбавка категории (например, max_speed)

        Returns:
            Новый Price
        """
        if self.amount is None:
            return self
        return Price.of(self.amount + surcharge)

    def require(self) -> int:
        """
        Значение цены.

        Raises:
            ValueError: Если цена отсутствует
        """
        if self.amount is None:
            raise ValueError("price is missing")
        return self.amount

    def __str__(self) -> str:
        return "N/A" if self.amount is None else str(self.amount)
