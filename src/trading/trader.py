"""
Trader — Трейдер с inventory, wishlist и балансом

Трейдер владеет предметами (inventory), хочет приобрести предметы (wishlist)
и обменивает предметы на деньги с другим трейдером по цене продажи,
рассчитанной pricing strategy.

Инварианты:
- Проданный предмет удаляется из inventory продавца и добавляется
  в inventory покупателя ровно один раз
- Деньги переходят парой debit/credit одинаковой величины;
  сумма балансов двух сторон сохраняется
- Баланс никогда не отрицательный

Продажа (settle_with / sell_to) двухфазная:
1. Оценка кандидатов (inventory ∩ wishlist покупателя) и оплата каждого
2. Пакетное применение: удаление из inventory продавца, добавление покупателю

Однопоточная модель: синхронизации нет.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Iterable, TypeVar

from src.core.domain.item import DrivableItem, Item
from src.core.domain.price import Price
from src.core.domain.trader_state import ItemRecord, TraderState
from src.trading.pricing import PricingStrategy, base_pricing, drivable_pricing

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Item)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class TradingDomainViolation(ValueError):
    """Нарушение доменных ограничений трейдера (отрицательный баланс, торговля с собой)."""


# =============================================================================
# ENUMS
# =============================================================================


class RejectReason(str, Enum):
    """Причина отказа в продаже предмета"""

    MISSING_PRICE = "missing_price"  # У предмета нет цены
    INSUFFICIENT_FUNDS = "insufficient_funds"  # У покупателя не хватает денег


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class TraderConfig:
    """Конфигурация трейдера."""

    # Удалять предмет из wishlist покупателя после покупки
    remove_purchased_from_wishlist: bool = False


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class RejectedItem:
    """Предмет, который не удалось продать."""

    item: Item
    reason: RejectReason
    price: Price


@dataclass(frozen=True)
class SaleResult:
    """Результат продажи одному покупателю."""

    sold_any: bool
    sold_items: tuple[Item, ...]
    proceeds: int  # Сумма, полученная продавцом
    rejected: tuple[RejectedItem, ...]

    # Детали
    details: str


# =============================================================================
# VALIDATION
# =============================================================================


def validate_money(money: int) -> int:
    """
    Проверка баланса.

    Raises:
        TradingDomainViolation: Если баланс не целый или отрицательный
    """
    if isinstance(money, bool) or not isinstance(money, int):
        raise TradingDomainViolation(f"money must be an integer, got {type(money).__name__}")
    if money < 0:
        raise TradingDomainViolation(f"money {money} must be non-negative")
    return money


# =============================================================================
# TRADER
# =============================================================================


class Trader(Generic[T]):
    """
    Трейдер, параметризованный типом предметов и стратегией цены.

    Категория задаётся композицией:
    - item_type: допустимый тип предметов (None — любые Item)
    - pricing: стратегия цены продажи (по умолчанию base_pricing)
    """

    def __init__(
        self,
        inventory: Iterable[T] = (),
        wishlist: Iterable[T] = (),
        money: int = 0,
        *,
        pricing: PricingStrategy | None = None,
        item_type: type[T] | None = None,
        name: str = "trader",
        config: TraderConfig | None = None,
    ):
        """
        Инициализация трейдера.

        Args:
            inventory: предметы во владении
            wishlist: желаемые предметы
            money: начальный баланс (>= 0)
            pricing: стратегия цены продажи
            item_type: допустимый тип предметов
            name: имя трейдера (для логов и снапшотов)
            config: конфигурация (опционально, используется default)
        """
        self._money = validate_money(money)
        self.name = name
        self.config = config or TraderConfig()
        self._pricing = pricing or base_pricing
        self._item_type = item_type

        self._inventory: list[T] = []
        self._wishlist: list[T] = []
        for item in inventory:
            self.add_to_inventory(item)
        for item in wishlist:
            self.add_to_wishlist(item)

    @classmethod
    def with_money(cls, money: int, **kwargs) -> "Trader[T]":
        """Трейдер с пустыми inventory и wishlist."""
        return cls(money=money, **kwargs)

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def inventory(self) -> list[T]:
        return self._inventory

    @property
    def wishlist(self) -> list[T]:
        return self._wishlist

    @property
    def money(self) -> int:
        return self._money

    def add_to_inventory(self, item: T) -> None:
        self._check_item_type(item)
        self._inventory.append(item)

    def add_to_wishlist(self, item: T) -> None:
        self._check_item_type(item)
        self._wishlist.append(item)

    # -------------------------------------------------------------------------
    # Pricing and payment
    # -------------------------------------------------------------------------

    def get_selling_price(self, item: T) -> Price:
        """
        Цена, которую этот трейдер просит за предмет.

        Returns:
            Price по стратегии трейдера; Price.missing(), если у предмета нет цены
        """
        return self._pricing(item)

    def exchange_money(self, other: "Trader[T]", item: T) -> bool:
        """
        Перевод денег от other к этому трейдеру по цене item.

        Атомарно: либо debit/credit полностью, либо никаких изменений.

        Returns:
            True, если обмен выполнен
        """
        return self._exchange(other, item) is None

    def _exchange(self, other: "Trader[T]", item: T) -> RejectedItem | None:
        self._ensure_peer(other)
        price = self.get_selling_price(item)
        if price.is_missing:
            logger.debug("%s: no price for %s, exchange refused", self.name, item.name)
            return RejectedItem(item=item, reason=RejectReason.MISSING_PRICE, price=price)

        amount = price.require()
        if amount > other._money:
            logger.debug(
                "%s: %s cannot afford %s (%d > %d)",
                self.name,
                other.name,
                item.name,
                amount,
                other._money,
            )
            return RejectedItem(item=item, reason=RejectReason.INSUFFICIENT_FUNDS, price=price)

        other._money -= amount
        self._money += amount
        logger.debug("%s: received %d from %s for %s", self.name, amount, other.name, item.name)
        return None

    # -------------------------------------------------------------------------
    # Trading
    # -------------------------------------------------------------------------

    def settle_with(self, other: "Trader[T]") -> SaleResult:
        """
        Продажа other всех предметов из inventory, которые есть в его wishlist.

        Фаза 1: оплата каждого кандидата (exchange_money).
        Фаза 2: пакетный перенос проданных предметов в inventory покупателя.

        Returns:
            SaleResult с проданными и отклонёнными предметами
        """
        self._ensure_peer(other)
        consume_wishes = other.config.remove_purchased_from_wishlist
        wishes = list(other._wishlist)

        sold: list[T] = []
        rejected: list[RejectedItem] = []
        proceeds = 0

        # 1. Оценка кандидатов
        for item in list(self._inventory):
            if item not in wishes:
                continue
            rejection = self._exchange(other, item)
            if rejection is not None:
                rejected.append(rejection)
                continue
            sold.append(item)
            proceeds += self.get_selling_price(item).require()
            if consume_wishes:
                wishes.remove(item)

        # 2. Пакетное применение
        for item in sold:
            self._inventory.remove(item)
            other._inventory.append(item)
            if consume_wishes:
                other._wishlist.remove(item)

        if sold:
            details = (
                f"SOLD: {len(sold)} item(s) to {other.name} for {proceeds}, "
                f"rejected={len(rejected)}"
            )
            logger.info("%s: %s", self.name, details)
        elif rejected:
            details = f"NO_SALE: all {len(rejected)} candidate(s) rejected"
        else:
            details = f"NO_SALE: no inventory items on {other.name}'s wishlist"

        return SaleResult(
            sold_any=bool(sold),
            sold_items=tuple(sold),
            proceeds=proceeds,
            rejected=tuple(rejected),
            details=details,
        )

    def sell_to(self, other: "Trader[T]") -> bool:
        """
        Продажа other предметов из его wishlist.

        Returns:
            True, если продан хотя бы один предмет
        """
        return self.settle_with(other).sold_any

    def buy_from(self, other: "Trader[T]") -> bool:
        """
        Покупка у other.

        Returns:
            True, если куплен хотя бы один предмет
        """
        return other.sell_to(self)

    # -------------------------------------------------------------------------
    # Diagnostics
    # -------------------------------------------------------------------------

    def snapshot(self) -> TraderState:
        """Снапшот трейдера с ценами продажи по его стратегии."""
        return TraderState(
            name=self.name,
            money=self._money,
            inventory=[self._record(item) for item in self._inventory],
            wishlist=[self._record(item) for item in self._wishlist],
        )

    def _record(self, item: T) -> ItemRecord:
        return ItemRecord(
            name=item.name,
            base_price=item.base_price,
            selling_price=self.get_selling_price(item).amount,
            attributes=item.category_attributes(),
        )

    def _check_item_type(self, item: T) -> None:
        if self._item_type is not None and not isinstance(item, self._item_type):
            raise TypeError(
                f"{self.name} accepts only {self._item_type.__name__}, "
                f"got {type(item).__name__}"
            )

    def _ensure_peer(self, other: "Trader[T]") -> None:
        if other is self:
            raise TradingDomainViolation(f"{self.name} cannot trade with itself")

    def __str__(self) -> str:
        lines = ["-- Inventory --"]
        lines += [str(item) for item in self._inventory]
        lines.append("-- Wishlist --")
        lines += [str(item) for item in self._wishlist]
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return (
            f"Trader(name={self.name!r}, money={self._money}, "
            f"inventory={len(self._inventory)}, wishlist={len(self._wishlist)})"
        )


# =============================================================================
# FACTORIES
# =============================================================================


def make_drivable_trader(
    inventory: Iterable[DrivableItem] = (),
    wishlist: Iterable[DrivableItem] = (),
    money: int = 0,
    *,
    name: str = "drivable_trader",
    config: TraderConfig | None = None,
) -> Trader[DrivableItem]:
    """
    Трейдер категории Drivable.

    Принимает только DrivableItem, цена продажи = base_price + max_speed.
    """
    return Trader(
        inventory,
        wishlist,
        money,
        pricing=drivable_pricing,
        item_type=DrivableItem,
        name=name,
        config=config,
    )
