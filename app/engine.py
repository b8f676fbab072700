import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Optional, Union

from pydantic import BaseModel, ValidationError

from app.errors import InvalidInput, InvalidStrategy
from app.models import (
    LineItem,
    Product,
    SalesDataset,
    Seller,
    SellerReport,
    SellerStats,
    TopProduct,
)
from app.money import round_money, to_decimal
from app.strategies import (
    BonusStrategy,
    RevenueStrategy,
    calculate_bonus_by_profit,
    calculate_simple_revenue,
)

logger = logging.getLogger(__name__)

TOP_PRODUCTS_LIMIT = 10


@dataclass(frozen=True)
class AnalysisOptions:
    calculate_revenue: RevenueStrategy = calculate_simple_revenue
    calculate_bonus: BonusStrategy = calculate_bonus_by_profit


def _get(source: Any, name: str) -> Any:
    if isinstance(source, Mapping):
        return source.get(name)
    return getattr(source, name, None)


def _key(value: Any) -> Optional[str]:
    # ids and skus match by their text form, so 1 and "1" are the same key
    return None if value is None else str(value)


def _require_list(data: Any, name: str) -> Sequence:
    raw = _get(data, name)
    if not isinstance(raw, (list, tuple)) or len(raw) == 0:
        raise InvalidInput(f"'{name}' must be a non-empty list")
    return raw


def _coerce(model: type[BaseModel], entry: Any, name: str) -> Any:
    try:
        return model.model_validate(entry)
    except ValidationError as exc:
        raise InvalidInput(f"'{name}' contains a malformed entry: {exc}") from exc


def _load_collection(data: Any, name: str, model: type[BaseModel]) -> list:
    return [_coerce(model, entry, name) for entry in _require_list(data, name)]


def _resolve_strategies(options: Any) -> tuple[RevenueStrategy, BonusStrategy]:
    calculate_revenue = _get(options, "calculate_revenue") if options is not None else None
    calculate_bonus = _get(options, "calculate_bonus") if options is not None else None
    if not callable(calculate_revenue) or not callable(calculate_bonus):
        raise InvalidStrategy("calculate_revenue and calculate_bonus must both be callable")
    return calculate_revenue, calculate_bonus


def _top_products(products_sold: dict[str, int]) -> list[TopProduct]:
    # sorted() is stable, so equal quantities keep first-sale order
    ranked = sorted(products_sold.items(), key=lambda entry: entry[1], reverse=True)
    return [TopProduct(sku=sku, quantity=qty) for sku, qty in ranked[:TOP_PRODUCTS_LIMIT]]


def analyze_sales_data(
    data: Optional[Union[SalesDataset, Mapping]],
    options: Optional[Union[AnalysisOptions, Mapping]],
) -> list[SellerReport]:
    """
    Aggregate revenue and profit per seller, rank sellers by profit and
    attach a bonus and the top-selling products to each.

    Records for unknown sellers and items for unknown skus are skipped
    without raising. Returns one entry per distinct seller id, profit
    descending, with revenue, profit and bonus rounded to 2 dp.
    """
    if data is None:
        raise InvalidInput("Sales data is required")

    sellers: list[Seller] = _load_collection(data, "sellers", Seller)
    products: list[Product] = _load_collection(data, "products", Product)
    # records and their items are coerced only once their seller and sku resolve
    records = _require_list(data, "purchase_records")

    calculate_revenue, calculate_bonus = _resolve_strategies(options)

    # ── 1. Indices (last duplicate wins) ─────────────────────────────────────
    seller_by_id = {_key(s.id): s for s in sellers}
    product_by_sku = {_key(p.sku): p for p in products}

    # ── 2. Zeroed stats for every seller ─────────────────────────────────────
    stats_by_id: dict[str, SellerStats] = {
        key: SellerStats(seller_id=seller.id, name=seller.full_name)
        for key, seller in seller_by_id.items()
    }

    # ── 3. Scan purchase records ─────────────────────────────────────────────
    skipped_records = skipped_items = 0
    for record in records:
        seller_id = _get(record, "seller_id")
        stats = stats_by_id.get(_key(seller_id))
        if stats is None:
            skipped_records += 1
            logger.debug("Skipping purchase record for unknown seller %r", seller_id)
            continue

        items = _get(record, "items")
        if not isinstance(items, (list, tuple)):
            raise InvalidInput(f"Purchase record for seller {seller_id!r} has no items list")

        for raw_item in items:
            sku = _key(_get(raw_item, "sku"))
            product = product_by_sku.get(sku)
            if product is None:
                skipped_items += 1
                logger.debug("Skipping line item with unknown sku %r", sku)
                continue

            item: LineItem = _coerce(LineItem, raw_item, "purchase_records")
            revenue = to_decimal(calculate_revenue(item, product))
            profit = revenue - product.purchase_price * item.quantity

            stats.revenue += revenue
            stats.profit += profit
            stats.sales_count += item.quantity
            stats.products_sold[sku] = stats.products_sold.get(sku, 0) + item.quantity

    # ── 4. Rank by profit (stable on ties) ───────────────────────────────────
    ranked = sorted(stats_by_id.values(), key=lambda s: s.profit, reverse=True)
    total = len(ranked)

    # ── 5/6. Bonus, top products, rounding ───────────────────────────────────
    report = [
        SellerReport(
            seller_id=stats.seller_id,
            name=stats.name,
            revenue=round_money(stats.revenue),
            profit=round_money(stats.profit),
            sales_count=stats.sales_count,
            top_products=_top_products(stats.products_sold),
            bonus=round_money(calculate_bonus(index, total, stats)),
        )
        for index, stats in enumerate(ranked)
    ]

    logger.debug(
        "Analyzed %d purchase records for %d sellers (%d records, %d items skipped)",
        len(records), total, skipped_records, skipped_items,
    )
    return report
