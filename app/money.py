from decimal import Decimal, ROUND_HALF_UP

TWO_DP = Decimal("0.01")


def to_decimal(value) -> Decimal:
    """Coerce a strategy result to Decimal. Floats go through str() so 0.1 stays 0.1."""
    if isinstance(value, bool):
        raise TypeError(f"Expected a number, got {value!r}")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(str(value))
    raise TypeError(f"Expected a number, got {type(value).__name__}")


def round_money(value) -> Decimal:
    """Round to 2 dp, half-up. Rounding an already rounded value is a no-op."""
    return to_decimal(value).quantize(TWO_DP, rounding=ROUND_HALF_UP)
