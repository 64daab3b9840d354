"""Inference of the one posting amount a transaction may omit."""

from ledgerlite.domain.errors import ElisionError
from ledgerlite.domain.models import Amount, Commodity, Posting, Transaction


def infer_elided_amount(
    transaction: Transaction,
    default_commodity: Commodity,
) -> Posting | None:
    """Fill in the posting whose amount was left out.

    The missing amount is the negated weight sum of the other balancing
    postings. It is left absent when the transaction holds an
    unevaluated expression amount.

    Args:
        transaction: Transaction whose postings are inspected and updated.
        default_commodity: Commodity used when no other posting has one.

    Returns:
        Posting | None: The posting that received a generated amount.

    Raises:
        ElisionError: If several amounts are missing or the known
            postings span more than one commodity.
    """
    missing = [
        posting for posting in transaction.postings if posting.amount is None
    ]
    if not missing:
        return None
    if len(missing) > 1:
        raise ElisionError("only one posting can have an elided amount")
    if transaction.has_expression_postings():
        return None

    elided = missing[0]
    totals: dict[str, Amount] = {}
    for posting in transaction.balancing_postings():
        if posting is elided:
            continue
        weight = posting.weight()
        symbol = weight.commodity.symbol
        totals[symbol] = weight if symbol not in totals else totals[symbol] + weight

    if len(totals) > 1:
        symbols = ", ".join(sorted(totals))
        raise ElisionError(
            f"cannot infer elided amount for {elided.account.full_name}: "
            f"postings use multiple commodities ({symbols})"
        )
    if totals:
        (total,) = totals.values()
        elided.amount = -total
    else:
        elided.amount = Amount.zero(default_commodity)
    elided.is_generated = True
    return elided


__all__ = ["infer_elided_amount"]
