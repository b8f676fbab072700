"""
Deterministic sample-data generator.

Produces:
  - 5 sellers
  - 30 products across 3 categories (purchase price 50–2000)
  - 200 purchase records of 1–5 items each
    - sale price = purchase price * 1.1–1.8
    - discount 0 % on ~60 % of items, otherwise 5–30 %
  - 1 record for a seller that does not exist
  - 1 line item for a sku that does not exist
"""

import random
from decimal import Decimal

from app.models import LineItem, Product, PurchaseRecord, SalesDataset, Seller

SEED = 42
N_RECORDS = 200

_SELLERS = [
    ("seller_1", "Alexey", "Petrov"),
    ("seller_2", "Ivan", "Smirnov"),
    ("seller_3", "Maria", "Kuznetsova"),
    ("seller_4", "Olga", "Popova"),
    ("seller_5", "Dmitry", "Volkov"),
]

_CATEGORIES = ["ELEC", "HOME", "SPORT"]


def _money(rng: random.Random, lo: float, hi: float) -> Decimal:
    return Decimal(str(round(rng.uniform(lo, hi), 2)))


def build_sample_dataset(seed: int = SEED) -> SalesDataset:
    rng = random.Random(seed)

    # ── sellers ──────────────────────────────────────────────────────────────
    sellers = [Seller(id=sid, first_name=first, last_name=last) for sid, first, last in _SELLERS]

    # ── products ─────────────────────────────────────────────────────────────
    products = [
        Product(sku=f"SKU_{cat}_{n:03d}", purchase_price=_money(rng, 50, 2000))
        for cat in _CATEGORIES
        for n in range(1, 11)
    ]

    # ── purchase records ─────────────────────────────────────────────────────
    records: list[PurchaseRecord] = []
    for _ in range(N_RECORDS):
        items = []
        for product in rng.sample(products, rng.randint(1, 5)):
            markup = Decimal(str(round(rng.uniform(1.1, 1.8), 2)))
            discount = Decimal("0") if rng.random() < 0.6 else Decimal(rng.randint(5, 30))
            items.append(LineItem(
                sku=product.sku,
                sale_price=(product.purchase_price * markup).quantize(Decimal("0.01")),
                quantity=rng.randint(1, 10),
                discount=discount,
            ))
        records.append(PurchaseRecord(seller_id=rng.choice(_SELLERS)[0], items=items))

    # tolerance paths: unknown seller, unknown sku
    records.append(PurchaseRecord(
        seller_id="seller_404",
        items=[LineItem(sku=products[0].sku, sale_price=Decimal("100"), quantity=1)],
    ))
    records[0].items.append(LineItem(sku="SKU_MISSING_001", sale_price=Decimal("10"), quantity=3))

    return SalesDataset(sellers=sellers, products=products, purchase_records=records)
