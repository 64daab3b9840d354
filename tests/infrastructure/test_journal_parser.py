"""Tests for the ledger journal parser."""

from datetime import date
from fractions import Fraction
from unittest.mock import MagicMock

import pytest

from ledgerlite.domain.errors import JournalParseError
from ledgerlite.domain.models import (
    AccountDirective,
    AccountTree,
    CommodityDirective,
    CommodityRegistry,
    PostingType,
    PriceDirective,
    TransactionStatus,
)
from ledgerlite.infrastructure.parser.parser import (
    LedgerJournalParser,
    parse_comment,
)


def _parse(text: str):
    accounts = AccountTree()
    commodities = CommodityRegistry()
    parsed = LedgerJournalParser(logger=MagicMock()).parse(
        text,
        accounts,
        commodities,
    )
    return parsed, accounts, commodities


def test_parses_opening_balance_with_elision() -> None:
    """The elided posting should receive the balancing amount."""
    parsed, accounts, _ = _parse(
        "2011-01-01 * Opening balance\n"
        "    Assets:Cash        10.00 USD\n"
        "    Equity:Opening balance\n"
    )

    (transaction,) = parsed.transactions
    assert transaction.date == date(2011, 1, 1)
    assert transaction.status is TransactionStatus.CLEARED
    assert transaction.payee == "Opening balance"
    cash, equity = transaction.postings
    assert cash.amount.value == Fraction(10)
    assert equity.amount.value == Fraction(-10)
    assert equity.amount.commodity.symbol == "USD"
    assert equity.is_generated
    assert "Equity:Opening balance" in accounts


def test_reads_notes_tags_and_metadata() -> None:
    """Comments attach to the transaction or the preceding posting."""
    parsed, _, _ = _parse(
        "2024-01-05 Grocer  ; weekly shop\n"
        "    ; :food:home:\n"
        "    Expenses:Food    $12.50  ; apples\n"
        "        ; receipt: 1042\n"
        "    * Assets:Cash\n"
    )

    transaction = parsed.transactions[0]
    food, cash = transaction.postings
    assert transaction.note == "weekly shop"
    assert transaction.metadata == {"food": "", "home": ""}
    assert food.note == "apples"
    assert food.metadata == {"receipt": "1042"}
    assert cash.status is TransactionStatus.CLEARED
    assert cash.amount.value == Fraction("-12.5")


def test_virtual_postings_are_exempt_from_balancing() -> None:
    """() postings do not balance; [] postings do."""
    parsed, _, _ = _parse(
        "2024-01-05 Payday\n"
        "    Assets:Checking    $100\n"
        "    Income:Salary     -$100\n"
        "    (Budget:Food)      $40\n"
        "    [Budget:Rent]      $60\n"
        "    [Budget:Pool]     -$60\n"
    )

    types = [posting.posting_type for posting in parsed.transactions[0].postings]
    assert types[2] is PostingType.VIRTUAL
    assert types[3] is PostingType.BRACKETED


def test_priced_posting_balances_on_price_and_records_it() -> None:
    """A priced posting weighs its price and adds a price point."""
    parsed, _, commodities = _parse(
        "2024-02-01 Buy shares\n"
        "    Assets:Broker    10 AAPL @ $150.00\n"
        "    Assets:Checking\n"
    )

    checking = parsed.transactions[0].postings[1]
    assert checking.amount.value == -1500
    assert checking.amount.commodity.symbol == "$"
    price = commodities.find("AAPL").latest_price("$")
    assert price.value == 150


def test_balance_assignment_and_assertion() -> None:
    """= fills in the difference; == checks the running balance."""
    parsed, _, _ = _parse(
        "2024-01-01 Open\n"
        "    Assets:Cash    $100\n"
        "    Equity:Opening\n"
        "\n"
        "2024-01-31 Reconcile\n"
        "    Assets:Cash    = $80\n"
        "    Expenses:Misc\n"
        "\n"
        "2024-02-01 Check\n"
        "    Assets:Cash    $0 == $80\n"
        "    Equity:Opening\n"
    )

    reconcile = parsed.transactions[1]
    assert reconcile.postings[0].amount.value == -20
    assert reconcile.postings[0].is_generated
    assert reconcile.postings[1].amount.value == 20


def test_failed_balance_assertion_stops_the_load() -> None:
    """A wrong assertion is a parse error at the transaction line."""
    with pytest.raises(JournalParseError) as exc:
        _parse(
            "2024-01-01 Open\n"
            "    Assets:Cash    $100 == $90\n"
            "    Equity:Opening\n"
        )

    assert exc.value.line_number == 1
    assert "balance assertion failed" in str(exc.value)


@pytest.mark.parametrize(
    ("text", "line_number", "message"),
    [
        (
            "2024-02-30 Bad date\n    A  $1\n    B\n",
            1,
            "invalid date",
        ),
        (
            "2024-01-01 One posting\n    Assets:Cash  $1\n",
            1,
            "at least 2 postings",
        ),
        (
            "2024-01-01 Two elided\n    A  $1\n    B\n    C\n",
            1,
            "only one posting",
        ),
        (
            "2024-01-01 Mixed\n    A  $1\n    B  1 EUR\n    C\n",
            1,
            "multiple commodities",
        ),
        (
            "2024-01-01 Unbalanced\n    A  $1\n    B  -$2\n",
            1,
            "does not balance",
        ),
        (
            "2024-01-01 Sub-cent\n    A  $10.004\n    B  $-10.00\n",
            1,
            "does not balance",
        ),
        (
            "2024-01-01 Sub-cent\n    A  $-10.00\n    B  $10.004\n",
            1,
            "does not balance",
        ),
        (
            "; header comment\n2024-01-01 Bad amount\n    A  $1.x\n    B\n",
            3,
            "invalid amount",
        ),
    ],
)
def test_parse_errors_report_line_numbers(text, line_number, message) -> None:
    """Every malformed construct should stop parsing with its line."""
    with pytest.raises(JournalParseError) as exc:
        _parse(text)

    assert exc.value.line_number == line_number
    assert message in str(exc.value)
    assert str(exc.value).startswith(f"line {line_number}:")


def test_single_space_keeps_amount_in_account_name() -> None:
    """Only a two-space run or a tab separates account and amount."""
    parsed, accounts, _ = _parse(
        "2024-01-01 Shop\n"
        "    Expenses:Household $10.00\n"
        "    Assets:Cash  $-10.00\n"
    )

    household, cash = parsed.transactions[0].postings
    assert household.account.full_name == "Expenses:Household $10.00"
    assert household.is_generated
    assert household.amount.format() == "$10.00"
    assert "Expenses:Household" not in accounts
    assert cash.amount.value == Fraction(-10)


def test_expression_amount_skips_elision_and_validation() -> None:
    """An unevaluated expression leaves the other amount absent."""
    parsed, _, _ = _parse(
        "2024-01-01 Split\n"
        "    Expenses:Food    ($30 / 2)\n"
        "    Assets:Cash\n"
    )

    food, cash = parsed.transactions[0].postings
    assert food.is_expression
    assert cash.amount is None


def test_directives_update_registries() -> None:
    """Account, commodity and price directives apply at load time."""
    parsed, accounts, commodities = _parse(
        "account Assets:Bank:Checking\n"
        "    note Main account\n"
        "    alias checking\n"
        "\n"
        "commodity EUR\n"
        "    format 1,000.000 EUR\n"
        "    nomarket\n"
        "\n"
        'P 2024-01-01 12:00:00 "VANGUARD 500" $410.25\n'
        "\n"
        "2024-01-02 Deposit\n"
        "    checking    2.5 EUR\n"
        "    Income:Gift\n"
    )

    account, commodity, price = parsed.directives
    assert isinstance(account, AccountDirective)
    assert account.aliases == ("checking",)
    assert isinstance(commodity, CommodityDirective)
    assert commodity.no_market
    assert isinstance(price, PriceDirective)
    assert price.symbol == "VANGUARD 500"

    posting = parsed.transactions[0].postings[0]
    assert posting.account.full_name == "Assets:Bank:Checking"
    assert accounts.find("Assets:Bank:Checking").note == "Main account"
    assert commodities.find("EUR").precision == 3
    vanguard = commodities.find("VANGUARD 500")
    assert vanguard.price_at(date(2024, 6, 1), "$").value == Fraction("410.25")


def test_default_commodity_directive_changes_bare_numbers() -> None:
    """A default commodity applies to bare numbers read after it."""
    parsed, _, _ = _parse(
        "commodity EUR\n"
        "    default\n"
        "\n"
        "2024-01-01 Coffee\n"
        "    Expenses:Coffee    3.20\n"
        "    Assets:Cash\n"
    )

    coffee = parsed.transactions[0].postings[0]
    assert coffee.amount.commodity.symbol == "EUR"


def test_unsupported_lines_are_ignored() -> None:
    """Unknown top-level lines and comment blocks are skipped."""
    logger = MagicMock()
    parsed = LedgerJournalParser(logger=logger).parse(
        "include other.ledger\n"
        "# comment\n"
        "2024-01-01 Coffee\n"
        "    Expenses:Coffee    $3\n"
        "    Assets:Cash\n",
        AccountTree(),
        CommodityRegistry(),
    )

    assert len(parsed.transactions) == 1
    logger.debug.assert_called()
    logger.info.assert_called_with("Parsed 1 transactions and 0 directives")


def test_parse_comment() -> None:
    """Comments are notes, tag lists or key/value metadata."""
    assert parse_comment(" lunch with Bob ") == ("lunch with Bob", {})
    assert parse_comment(":a:b:") == (None, {"a": "", "b": ""})
    assert parse_comment("Payee: Corner shop") == (None, {"Payee": "Corner shop"})
    assert parse_comment("  ") == (None, {})
