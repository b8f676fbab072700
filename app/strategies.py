"""
Default revenue and bonus strategies.

Callers may pass their own functions with the same signatures to
``analyze_sales_data`` through ``AnalysisOptions``.

Money fields on the arguments (``LineItem.sale_price``, ``LineItem.discount``,
``Product.purchase_price``, ``SellerStats.revenue`` / ``profit``) are
``Decimal``. Multiply them by ``Decimal`` or ``int`` rates; ``Decimal * float``
raises ``TypeError``. A strategy may return ``Decimal``, ``int`` or ``float``:
floats are converted through ``str()`` before they are accumulated.
"""

from decimal import Decimal
from typing import Callable, Union

from app.models import LineItem, Product, SellerStats

Number = Union[Decimal, int, float]

# (item, product) → revenue of that line item; Decimal money fields in
RevenueStrategy = Callable[[LineItem, Product], Number]
# (rank_index, total_sellers, seller_stats) → bonus; Decimal revenue/profit in
BonusStrategy = Callable[[int, int, SellerStats], Number]

_HUNDRED = Decimal("100")


def calculate_simple_revenue(item: LineItem, _product: Product) -> Decimal:
    """Sale price times quantity, less the item's percentage discount."""
    total_price = item.sale_price * item.quantity
    return total_price * (1 - item.discount / _HUNDRED)


def calculate_bonus_by_profit(index: int, total: int, seller: SellerStats) -> Decimal:
    """
    Rank-based bonus over the profit-sorted sellers.

    Branches are checked top to bottom, so a lone seller (rank 0 and last at
    once) still gets the top-seller rate.
    """
    if index == 0:
        return seller.profit * Decimal("0.15")
    if index in (1, 2):
        return seller.profit * Decimal("0.10")
    if index < total - 1:
        return seller.profit * Decimal("0.05")
    return Decimal("0")
