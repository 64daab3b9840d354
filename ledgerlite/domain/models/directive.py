"""Journal directives and their effect on the registries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Union

from ledgerlite.domain.models.account import AccountTree
from ledgerlite.domain.models.amount import Amount
from ledgerlite.domain.models.commodity import CommodityRegistry


@dataclass(frozen=True)
class AccountDirective:
    """``account NAME`` with optional ``note`` and ``alias`` sub-lines."""

    name: str
    note: str | None = None
    aliases: tuple[str, ...] = ()
    line_number: int | None = None


@dataclass(frozen=True)
class CommodityDirective:
    """``commodity SYMBOL`` with optional sub-lines."""

    symbol: str
    note: str | None = None
    display_format: str | None = None
    no_market: bool = False
    alias: str | None = None
    is_default: bool = False
    line_number: int | None = None


@dataclass(frozen=True)
class PriceDirective:
    """``P DATE SYMBOL PRICE``: one unit of ``symbol`` costs ``price``."""

    date: date
    symbol: str
    price: Amount
    line_number: int | None = None


Directive = Union[AccountDirective, CommodityDirective, PriceDirective]


def _apply_account(directive: AccountDirective, accounts: AccountTree) -> None:
    account = accounts.get_or_create(directive.name)
    if directive.note is not None:
        account.note = directive.note
    for alias in directive.aliases:
        accounts.add_alias(alias, account.full_name)


def _apply_commodity(
    directive: CommodityDirective,
    commodities: CommodityRegistry,
) -> None:
    commodity = commodities.get_or_create(directive.symbol)
    if directive.note is not None:
        commodity.note = directive.note
    if directive.display_format is not None:
        commodity.apply_format(directive.display_format)
    if directive.no_market:
        commodity.no_market = True
    if directive.alias is not None:
        commodities.add_alias(directive.alias, commodity.symbol)
    if directive.is_default:
        commodities.default_symbol = commodity.symbol


def _apply_price(
    directive: PriceDirective,
    commodities: CommodityRegistry,
) -> None:
    commodity = commodities.get_or_create(directive.symbol)
    commodity.add_price(directive.date, directive.price)


def apply_directive(
    directive: Directive,
    accounts: AccountTree,
    commodities: CommodityRegistry,
) -> None:
    """Apply a directive to the account tree and commodity registry.

    Args:
        directive: Parsed directive of any supported kind.
        accounts: Account tree being populated.
        commodities: Commodity registry being populated.

    Raises:
        TypeError: If the directive kind is not supported.
    """
    if isinstance(directive, AccountDirective):
        _apply_account(directive, accounts)
    elif isinstance(directive, CommodityDirective):
        _apply_commodity(directive, commodities)
    elif isinstance(directive, PriceDirective):
        _apply_price(directive, commodities)
    else:
        raise TypeError(f"Unsupported directive: {directive!r}")


__all__ = [
    "AccountDirective",
    "CommodityDirective",
    "PriceDirective",
    "Directive",
    "apply_directive",
]
