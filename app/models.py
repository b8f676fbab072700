from pydantic import BaseModel, Field
from decimal import Decimal
from typing import Union

SellerId = Union[int, str]
Sku = Union[int, str]


class Seller(BaseModel):
    id: SellerId
    first_name: str
    last_name: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Product(BaseModel):
    sku: Sku
    purchase_price: Decimal  # cost of one unit


class LineItem(BaseModel):
    sku: Sku
    sale_price: Decimal
    quantity: int
    discount: Decimal = Decimal("0")  # percent, e.g. Decimal("15") for 15 %


class PurchaseRecord(BaseModel):
    seller_id: SellerId
    items: list[LineItem]


class SalesDataset(BaseModel):
    sellers: list[Seller]
    products: list[Product]
    purchase_records: list[PurchaseRecord]


# ── Accumulator ──────────────────────────────────────────────────────────────

class SellerStats(BaseModel):
    seller_id: SellerId
    name: str
    revenue: Decimal = Decimal("0")
    profit: Decimal = Decimal("0")
    sales_count: int = 0
    # sku (as text) → units sold, in order of first sale
    products_sold: dict[str, int] = Field(default_factory=dict)


# ── Response models ──────────────────────────────────────────────────────────

class TopProduct(BaseModel):
    sku: str
    quantity: int


class SellerReport(BaseModel):
    seller_id: SellerId
    name: str
    revenue: Decimal
    profit: Decimal
    sales_count: int
    top_products: list[TopProduct]
    bonus: Decimal
