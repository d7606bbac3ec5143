"""Trading — трейдеры, стратегии цены и продажа предметов.

- Pricing strategies: base_pricing, surcharge_pricing, drivable_pricing
- Trader: inventory / wishlist / баланс, exchange_money, sell_to, buy_from
- make_drivable_trader: трейдер категории Drivable
"""

from .pricing import (
    PricingStrategy,
    base_pricing,
    drivable_pricing,
    max_speed_surcharge,
    surcharge_pricing,
)
from .trader import (
    RejectedItem,
    RejectReason,
    SaleResult,
    Trader,
    TraderConfig,
    TradingDomainViolation,
    make_drivable_trader,
    validate_money,
)

__all__ = [
    "PricingStrategy",
    "base_pricing",
    "drivable_pricing",
    "max_speed_surcharge",
    "surcharge_pricing",
    "RejectedItem",
    "RejectReason",
    "SaleResult",
    "Trader",
    "TraderConfig",
    "TradingDomainViolation",
    "make_drivable_trader",
    "validate_money",
]
