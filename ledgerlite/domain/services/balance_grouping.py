"""Grouping of leaf account balances into balance report rows."""

from collections import defaultdict
from collections.abc import Mapping

from ledgerlite.domain.models import Balance, BalanceRow
from ledgerlite.domain.models.account import parent_name_of, top_level_name


def _flat_rows(leaf_balances: Mapping[str, Balance]) -> list[BalanceRow]:
    return [
        BalanceRow(full_name=name, balance=balance.copy())
        for name, balance in leaf_balances.items()
    ]


def _top_level_rows(leaf_balances: Mapping[str, Balance]) -> list[BalanceRow]:
    totals: dict[str, Balance] = {}
    for name, balance in leaf_balances.items():
        totals.setdefault(top_level_name(name), Balance()).add_balance(balance)
    return [
        BalanceRow(full_name=name, balance=balance)
        for name, balance in totals.items()
    ]


def _hierarchical_rows(
    leaf_balances: Mapping[str, Balance],
) -> list[BalanceRow]:
    children: dict[str, list[str]] = defaultdict(list)
    for name in leaf_balances:
        parent = parent_name_of(name)
        if parent is not None:
            children[parent].append(name)

    totals: dict[str, Balance] = {}
    synthesized: set[str] = set()
    for name, balance in leaf_balances.items():
        parent = parent_name_of(name)
        if parent is not None and len(children[parent]) > 1:
            synthesized.add(parent)
            totals.setdefault(parent, Balance()).add_balance(balance)
        totals.setdefault(name, Balance()).add_balance(balance)

    rows = []
    for name, balance in totals.items():
        # Synthesized parents always sit at depth 1.
        nested = name not in synthesized and parent_name_of(name) in synthesized
        depth = 2 if nested else 1
        rows.append(BalanceRow(full_name=name, balance=balance, depth=depth))
    return rows


def group_account_balances(
    leaf_balances: Mapping[str, Balance],
    *,
    flat: bool = False,
    no_rollup: bool = False,
    show_empty: bool = False,
) -> list[BalanceRow]:
    """Build the rows of a balance report from leaf balances.

    In the default mode a parent row is synthesized only when two or more
    used accounts share that immediate parent; those children move to
    depth 2. A lone child stays at depth 1 under its full name.

    Args:
        leaf_balances: Own balance of every account in scope, keyed by
            full name.
        flat: Show every account at its full name without parent rows.
        no_rollup: Aggregate balances to top-level account names only.
        show_empty: Keep rows whose balance is zero.

    Returns:
        list[BalanceRow]: Rows sorted by full account name. Empty when
        ``flat`` and ``no_rollup`` are combined.
    """
    if flat and no_rollup:
        return []
    if no_rollup:
        rows = _top_level_rows(leaf_balances)
    elif flat:
        rows = _flat_rows(leaf_balances)
    else:
        rows = _hierarchical_rows(leaf_balances)
    kept = [row for row in rows if show_empty or not row.balance.is_zero()]
    return sorted(kept, key=lambda row: row.full_name)


def sum_leaf_balances(leaf_balances: Mapping[str, Balance]) -> Balance:
    """Return the report total; synthesized parent rows are never counted."""
    total = Balance()
    for balance in leaf_balances.values():
        total.add_balance(balance)
    return total


__all__ = ["group_account_balances", "sum_leaf_balances"]
