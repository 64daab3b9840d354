"""Text rendering of stats, listings and prices."""

from ledgerlite.application.use_cases.get_stats import JournalStats
from ledgerlite.application.use_cases.list_prices import PriceEntry

LABEL_WIDTH = 29


def _stat(label: str, value) -> str:
    return f"  {label + ':':<{LABEL_WIDTH}}{value}"


def present_stats(stats: JournalStats | None) -> str:
    """Render journal statistics, or a notice for an empty journal."""
    if stats is None:
        return "No transactions found\n"
    lines = [
        f"Time period: {stats.first_date:%y-%b-%d} to "
        f"{stats.last_date:%y-%b-%d} ({stats.span_days} days)",
        "",
        _stat("Unique payees", stats.unique_payees),
        _stat("Unique accounts", stats.unique_accounts),
        "",
        _stat(
            "Number of postings",
            f"{stats.posting_count} ({stats.postings_per_day:.2f} per day)",
        ),
        _stat("Uncleared postings", stats.uncleared_postings),
        "",
        _stat("Days since last post", stats.days_since_last_post),
        _stat("Posts in last 7 days", stats.posts_last_7_days),
        _stat("Posts in last 30 days", stats.posts_last_30_days),
        _stat("Posts seen this month", stats.posts_this_month),
    ]
    return "\n".join(lines) + "\n"


def present_lines(items: list[str]) -> str:
    """Render one item per line."""
    return "".join(f"{item}\n" for item in items)


def present_prices(entries: list[PriceEntry]) -> str:
    """Render prices as ``DATE COMMODITY PRICE``."""
    return "".join(
        f"{entry.date:%Y/%m/%d} {entry.commodity:<10} {entry.price.format():>12}\n"
        for entry in entries
    )


__all__ = ["present_stats", "present_lines", "present_prices"]
