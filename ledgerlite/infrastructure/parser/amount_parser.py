"""Amount literals and the amount part of posting lines.

Comma is always a thousands separator and period the decimal point.
"""

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from fractions import Fraction

from ledgerlite.domain.errors import AmountParseError
from ledgerlite.domain.models import (
    Amount,
    BalanceAssertion,
    CommodityRegistry,
    CostSpec,
    PriceSpec,
)

_NUMBER = r"(?:\d[\d,]*(?:\.\d*)?|\.\d+)"
_PREFIX_SYMBOL = r'(?:"[^"]+"|[$£€¥])'
_SUFFIX_SYMBOL = r'(?:"[^"]+"|[^\s\d\-+.,@=;{}()\[\]"]+)'

PREFIX_AMOUNT_RE = re.compile(
    rf"^(?P<sign>[-+])?\s*(?P<symbol>{_PREFIX_SYMBOL})\s*"
    rf"(?P<inner_sign>[-+])?(?P<number>{_NUMBER})$"
)
SUFFIX_AMOUNT_RE = re.compile(
    rf"^(?P<sign>[-+])?(?P<number>{_NUMBER})"
    rf"(?:\s*(?P<symbol>{_SUFFIX_SYMBOL}))?$"
)
COST_RE = re.compile(r"\{\{(?P<total>[^}]*)\}\}|\{(?P<unit>[^}]*)\}")
# Lot dates and lot notes written after a cost are accepted and dropped.
LOT_ANNOTATION_RE = re.compile(r"\[\d{4}[-/]\d{2}[-/]\d{2}\]|\((?![^)]*[\d$])[^)]*\)")


@dataclass(frozen=True)
class PostingAmount:
    """Everything written to the right of a posting's account name."""

    amount: Amount | None = None
    cost: CostSpec | None = None
    price: PriceSpec | None = None
    balance_assertion: BalanceAssertion | None = None
    is_expression: bool = False


def _strip_quotes(symbol: str) -> str:
    if len(symbol) >= 2 and symbol[0] == symbol[-1] == '"':
        return symbol[1:-1]
    return symbol


def _to_fraction(number: str, text: str) -> tuple[Fraction, int]:
    plain = number.replace(",", "")
    try:
        value = Decimal(plain)
    except InvalidOperation as exc:
        raise AmountParseError(f"invalid amount: {text!r}") from exc
    _, _, decimals = plain.partition(".")
    return Fraction(value), len(decimals)


def parse_amount_literal(
    text: str,
    commodities: CommodityRegistry,
    *,
    learn_precision: bool = False,
) -> Amount:
    """Parse ``$25.50``, ``-$5``, ``10.00 GBP``, ``-5.25 EUR`` or ``100``.

    Args:
        text: Amount literal without price, cost or assertion parts.
        commodities: Registry resolving and creating commodities.
        learn_precision: Record the literal's decimal digits as the
            commodity's display precision.

    Returns:
        Amount: Parsed amount; bare numbers use the default commodity.

    Raises:
        AmountParseError: If the literal does not match either form.
    """
    cleaned = text.strip()
    match = PREFIX_AMOUNT_RE.match(cleaned)
    if match is not None:
        negative = (match.group("sign") == "-") != (
            match.group("inner_sign") == "-"
        )
        commodity = commodities.get_or_create(
            _strip_quotes(match.group("symbol"))
        )
    else:
        match = SUFFIX_AMOUNT_RE.match(cleaned)
        if match is None:
            raise AmountParseError(f"invalid amount: {text!r}")
        negative = match.group("sign") == "-"
        symbol = match.group("symbol")
        commodity = (
            commodities.get_or_create(_strip_quotes(symbol))
            if symbol
            else commodities.default()
        )

    value, precision = _to_fraction(match.group("number"), text)
    if learn_precision:
        commodity.learn_precision(precision)
    return Amount(-value if negative else value, commodity)


def split_posting_line(text: str) -> tuple[str, str | None]:
    """Split a posting body at the first two-space run or tab.

    Returns:
        tuple[str, str | None]: Account text and amount text, the latter
        None when the line holds only an account name.
    """
    stripped = text.strip()
    positions = [
        position
        for position in (stripped.find("  "), stripped.find("\t"))
        if position >= 0
    ]
    if not positions:
        return stripped, None
    split_at = min(positions)
    account = stripped[:split_at].strip()
    amount = stripped[split_at:].strip()
    return account, amount or None


def _split_assertion(text: str) -> tuple[str, str | None, bool]:
    index = text.find("=")
    if index < 0:
        return text, None, False
    if text[index : index + 2] == "==":
        return text[:index], text[index + 2 :], False
    return text[:index], text[index + 1 :], True


def parse_posting_amount(
    text: str,
    commodities: CommodityRegistry,
) -> PostingAmount:
    """Parse ``amount [{cost}] [@ price] [= assignment | == assertion]``.

    Only the posted amount teaches its commodity a display precision.

    Raises:
        AmountParseError: If any literal in the text is malformed.
    """
    body, assertion_text, is_assignment = _split_assertion(text.strip())

    assertion = None
    if assertion_text is not None:
        assertion = BalanceAssertion(
            amount=parse_amount_literal(assertion_text, commodities),
            is_assignment=is_assignment,
        )

    cost = None
    cost_match = COST_RE.search(body)
    if cost_match is not None:
        is_total = cost_match.group("total") is not None
        raw_cost = cost_match.group("total" if is_total else "unit")
        cost = CostSpec(
            amount=parse_amount_literal(raw_cost, commodities),
            is_total=is_total,
        )
        body = body[: cost_match.start()] + body[cost_match.end() :]

    price = None
    at_index = body.find("@")
    if at_index >= 0:
        is_total = body[at_index : at_index + 2] == "@@"
        raw_price = body[at_index + (2 if is_total else 1) :]
        price = PriceSpec(
            amount=parse_amount_literal(
                LOT_ANNOTATION_RE.sub("", raw_price),
                commodities,
            ),
            is_total=is_total,
        )
        body = body[:at_index]

    body = body.strip()
    if body.startswith("(") and body.endswith(")"):
        return PostingAmount(
            amount=Amount.zero(commodities.default()),
            cost=cost,
            price=price,
            balance_assertion=assertion,
            is_expression=True,
        )

    body = LOT_ANNOTATION_RE.sub("", body).strip()
    amount = None
    if body:
        amount = parse_amount_literal(
            body,
            commodities,
            learn_precision=True,
        )
    return PostingAmount(
        amount=amount,
        cost=cost,
        price=price,
        balance_assertion=assertion,
    )


__all__ = [
    "PostingAmount",
    "parse_amount_literal",
    "parse_posting_amount",
    "split_posting_line",
]
