"""
Pricing strategies — расчёт цены продажи по категории предмета

Стратегия — функция Item → Price. Трейдер получает стратегию при создании,
поэтому категория (Drivable и т.д.) задаётся композицией, а не наследованием.

Формулы:
- base_pricing: price = base_price
- drivable_pricing: price = base_price + max_speed

Если у предмета нет базовой цены, любая стратегия возвращает Price.missing().
"""

from typing import Callable, TypeVar

from src.core.domain.item import DrivableItem, Item
from src.core.domain.price import Price

T = TypeVar("T", bound=Item)

PricingStrategy = Callable[[T], Price]


def base_pricing(item: Item) -> Price:
    """Цена по умолчанию: собственная базовая цена предмета."""
    return item.price()


def surcharge_pricing(surcharge: Callable[[T], int]) -> PricingStrategy:
    """
    Стратегия «базовая цена + надбавка категории».

    Args:
        surcharge: Функция, возвращающая надбавку для предмета

    Returns:
        PricingStrategy; для предмета без цены возвращает Price.missing()
    """

    def strategy(item: T) -> Price:
        price = item.price()
        if price.is_missing:
            return price
        return price.plus(surcharge(item))

    return strategy


def max_speed_surcharge(item: DrivableItem) -> int:
    return item.max_speed


# price = base_price + max_speed
drivable_pricing: PricingStrategy = surcharge_pricing(max_speed_surcharge)
