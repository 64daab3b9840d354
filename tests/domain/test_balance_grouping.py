"""Tests for grouping leaf balances into report rows."""

from ledgerlite.domain.models import Amount, Balance, Commodity
from ledgerlite.domain.services import group_account_balances, sum_leaf_balances

USD = Commodity("USD")


def _balances(**values) -> dict[str, Balance]:
    return {
        name.replace("__", ":"): Balance([Amount(value, USD)])
        for name, value in values.items()
    }


def _summary(rows) -> list[tuple[str, int, int]]:
    return [
        (row.full_name, row.depth, int(row.balance.get("USD").value))
        if not row.balance.is_zero()
        else (row.full_name, row.depth, 0)
        for row in rows
    ]


def test_lone_child_stays_at_depth_one() -> None:
    """A leaf without used siblings is shown under its full name."""
    rows = group_account_balances(
        _balances(Assets__Cash=10, Equity__Opening=-10)
    )

    assert _summary(rows) == [("Assets:Cash", 1, 10), ("Equity:Opening", 1, -10)]
    assert rows[0].display_name == "Assets:Cash"


def test_siblings_get_synthesized_parent() -> None:
    """Two children of one parent produce a parent row and depth 2 rows."""
    rows = group_account_balances(
        _balances(Assets__Bank__Checking=5, Assets__Bank__Savings=3)
    )

    assert _summary(rows) == [
        ("Assets:Bank", 1, 8),
        ("Assets:Bank:Checking", 2, 5),
        ("Assets:Bank:Savings", 2, 3),
    ]
    assert rows[1].display_name == "Checking"


def test_used_parent_merges_with_synthesized_row() -> None:
    """A parent that is also posted to shows its own and children's sums."""
    balances = _balances(
        Assets__Bank=1,
        Assets__Bank__Checking=5,
        Assets__Bank__Savings=3,
    )

    rows = group_account_balances(balances)

    assert _summary(rows)[0] == ("Assets:Bank", 1, 9)
    assert sum_leaf_balances(balances).get("USD").value == 9


def test_flat_mode_lists_every_account() -> None:
    """Flat mode should not synthesize parents."""
    rows = group_account_balances(
        _balances(Assets__Bank__Checking=5, Assets__Bank__Savings=3),
        flat=True,
    )

    assert _summary(rows) == [
        ("Assets:Bank:Checking", 1, 5),
        ("Assets:Bank:Savings", 1, 3),
    ]


def test_no_rollup_aggregates_to_top_level() -> None:
    """No-rollup sums by top-level segment."""
    rows = group_account_balances(
        _balances(Assets__Bank__Checking=5, Assets__Cash=3, Income__Job=-8),
        no_rollup=True,
    )

    assert _summary(rows) == [("Assets", 1, 8), ("Income", 1, -8)]


def test_flat_and_no_rollup_is_empty() -> None:
    """The two modes together produce no rows."""
    assert (
        group_account_balances(
            _balances(Assets__Cash=1),
            flat=True,
            no_rollup=True,
        )
        == []
    )


def test_zero_rows_hidden_unless_requested() -> None:
    """Zero balances are dropped by default."""
    balances = {"Assets:Cash": Balance(), "Income:Job": Balance([Amount(-1, USD)])}

    assert [row.full_name for row in group_account_balances(balances)] == [
        "Income:Job"
    ]
    assert [
        row.full_name
        for row in group_account_balances(balances, show_empty=True)
    ] == ["Assets:Cash", "Income:Job"]


def test_synthesized_parent_stays_at_depth_one() -> None:
    """A synthesized row is never nested under another synthesized row."""
    rows = group_account_balances(
        _balances(
            Assets__Bank__Checking=5,
            Assets__Bank__Savings=3,
            Assets__Cash=2,
            Assets__Broker=1,
        )
    )

    assert _summary(rows) == [
        ("Assets", 1, 3),
        ("Assets:Bank", 1, 8),
        ("Assets:Bank:Checking", 2, 5),
        ("Assets:Bank:Savings", 2, 3),
        ("Assets:Broker", 2, 1),
        ("Assets:Cash", 2, 2),
    ]
