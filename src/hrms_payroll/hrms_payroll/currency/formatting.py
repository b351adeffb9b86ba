"""Currency presentation.

Monetary values stay plain Decimals through the calculation; only this module
knows about symbols and digit grouping, and it is always handed the config it
should use.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Mapping, Optional

from ..common.money import round_half_up

WESTERN = "western"
LAKH = "lakh"


@dataclass(frozen=True)
class CurrencyConfig:
    code: str
    symbol: str
    decimals: int = 2
    grouping: str = WESTERN


DEFAULT_CURRENCIES: Mapping[str, CurrencyConfig] = {
    "IND": CurrencyConfig(code="INR", symbol="₹", decimals=2, grouping=LAKH),
    "UAE": CurrencyConfig(code="AED", symbol="AED", decimals=2, grouping=WESTERN),
}

FALLBACK_CURRENCY = CurrencyConfig(code="USD", symbol="$", decimals=2)


def currency_for(country_code: str, configs: Optional[Mapping[str, CurrencyConfig]] = None) -> CurrencyConfig:
    configs = configs if configs is not None else DEFAULT_CURRENCIES
    return configs.get((country_code or "").upper(), FALLBACK_CURRENCY)


def _group_lakh(digits: str) -> str:
    # Indian grouping: last three digits, then pairs (12,34,567).
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_number(amount: Decimal, config: CurrencyConfig) -> str:
    value = round_half_up(Decimal(amount), config.decimals)
    sign = "-" if value < 0 else ""
    text = f"{abs(value):.{config.decimals}f}"
    digits, _, fraction = text.partition(".")

    if config.grouping == LAKH:
        grouped = _group_lakh(digits)
    else:
        grouped = f"{int(digits):,}"

    return f"{sign}{grouped}.{fraction}" if fraction else f"{sign}{grouped}"


def format_amount(amount: Decimal, config: CurrencyConfig) -> str:
    number = format_number(amount, config)
    # Letter codes read better with a space ("AED 1,000.00"), glyphs without ("₹1,000.00").
    separator = " " if config.symbol.isalpha() else ""
    return f"{config.symbol}{separator}{number}"
