"""Line-oriented journal parser.

The parser groups lines into blocks (a transaction header or directive
followed by its indented lines), then turns each finished block into
domain objects. Parsing stops at the first error, reported as a
JournalParseError carrying the line number.
"""

import re
from dataclasses import dataclass, field

from ledgerlite.application.ports.journal_parser import (
    JournalParserPort,
    ParsedJournal,
)
from ledgerlite.domain.errors import (
    AmountParseError,
    BalanceAssertionError,
    ElisionError,
    JournalParseError,
    UnbalancedTransactionError,
)
from ledgerlite.domain.models import (
    AccountDirective,
    AccountTree,
    Balance,
    CommodityDirective,
    CommodityRegistry,
    Directive,
    Posting,
    PostingType,
    PriceDirective,
    Transaction,
    TransactionStatus,
    apply_directive,
)
from ledgerlite.domain.services import (
    check_balance_assertion,
    infer_elided_amount,
    validate_transaction_balance,
)
from ledgerlite.infrastructure.logging.logger import get_app_logger
from ledgerlite.infrastructure.parser.amount_parser import (
    PostingAmount,
    parse_amount_literal,
    parse_posting_amount,
    split_posting_line,
)
from ledgerlite.infrastructure.parser.lexer import (
    LineKind,
    classify_line,
    is_indented,
    parse_date,
    parse_header,
    split_note,
)

TAGS_RE = re.compile(r"^:(?:[^:\s]+:)+$")
METADATA_RE = re.compile(r"^(?P<key>[\w-]+):(?:\s+(?P<value>.*))?$")
PRICE_DIRECTIVE_RE = re.compile(
    r"^P\s+(?P<date>\S+)(?:\s+\d{1,2}:\d{2}(?::\d{2})?)?\s+"
    r'(?P<symbol>"[^"]+"|\S+)\s+(?P<price>.+)$'
)

MIN_POSTINGS = 2


@dataclass
class _Block:
    """A header or directive line plus the indented lines below it."""

    kind: LineKind
    line_number: int
    text: str
    lines: list[tuple[int, str]] = field(default_factory=list)


@dataclass
class _ParseState:
    accounts: AccountTree
    commodities: CommodityRegistry
    transactions: list[Transaction] = field(default_factory=list)
    directives: list[Directive] = field(default_factory=list)
    running: dict[str, Balance] = field(default_factory=dict)

    def running_balance(self, account_name: str) -> Balance:
        return self.running.setdefault(account_name, Balance())


def parse_comment(comment: str) -> tuple[str | None, dict[str, str]]:
    """Split a ``;`` comment into a free-text note or metadata.

    ``:tag1:tag2:`` yields tags with empty values and ``key: value`` yields
    one metadata entry. Anything else is a note.
    """
    text = comment.strip()
    if not text:
        return None, {}
    if TAGS_RE.match(text):
        return None, {tag: "" for tag in text.strip(":").split(":")}
    match = METADATA_RE.match(text)
    if match is not None:
        return None, {match.group("key"): (match.group("value") or "").strip()}
    return text, {}


def _strip_quotes(text: str) -> str:
    if len(text) >= 2 and text[0] == text[-1] == '"':
        return text[1:-1]
    return text


class LedgerJournalParser(JournalParserPort):
    """Parser for the ledger-style plain text journal dialect."""

    def __init__(self, logger=None) -> None:
        """Initialize the parser.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._logger = logger or get_app_logger()

    def parse(
        self,
        text: str,
        accounts: AccountTree,
        commodities: CommodityRegistry,
    ) -> ParsedJournal:
        """Parse journal text into transactions and directives.

        Args:
            text: Full journal contents.
            accounts: Account tree populated as postings are read.
            commodities: Commodity registry populated as amounts are read.

        Returns:
            ParsedJournal: Transactions and directives in file order.

        Raises:
            JournalParseError: On the first malformed construct.
        """
        state = _ParseState(accounts=accounts, commodities=commodities)
        block: _Block | None = None

        for line_number, line in enumerate(text.splitlines(), start=1):
            kind = classify_line(line)
            if kind is LineKind.BLANK:
                continue
            if is_indented(line):
                if block is not None:
                    block.lines.append((line_number, line))
                elif kind is LineKind.POSTING:
                    self._logger.debug(
                        f"Ignoring indented line {line_number} outside a block"
                    )
                continue

            if block is not None:
                self._finish_block(block, state)
                block = None

            if kind in (LineKind.HEADER, LineKind.DIRECTIVE):
                block = _Block(kind=kind, line_number=line_number, text=line)
            elif kind is LineKind.OTHER:
                self._logger.debug(
                    f"Ignoring unsupported line {line_number}: {line.strip()}"
                )

        if block is not None:
            self._finish_block(block, state)

        self._logger.info(
            f"Parsed {len(state.transactions)} transactions and "
            f"{len(state.directives)} directives"
        )
        return ParsedJournal(
            transactions=state.transactions,
            directives=state.directives,
        )

    def _finish_block(self, block: _Block, state: _ParseState) -> None:
        if block.kind is LineKind.HEADER:
            transaction = self._build_transaction(block, state)
            self._complete_transaction(transaction, state)
            state.transactions.append(transaction)
        else:
            directive = self._build_directive(block, state)
            try:
                apply_directive(directive, state.accounts, state.commodities)
            except ValueError as exc:
                raise JournalParseError(block.line_number, str(exc)) from exc
            state.directives.append(directive)

    def _build_transaction(
        self,
        block: _Block,
        state: _ParseState,
    ) -> Transaction:
        try:
            header = parse_header(block.text)
        except ValueError as exc:
            raise JournalParseError(block.line_number, str(exc)) from exc

        transaction = Transaction(
            date=header.date,
            payee=header.payee,
            status=header.status,
            aux_date=header.aux_date,
            code=header.code,
            line_number=block.line_number,
            index=len(state.transactions),
        )
        if header.note:
            self._attach_comment(transaction, header.note)

        current: Posting | None = None
        for line_number, line in block.lines:
            stripped = line.strip()
            if stripped.startswith(";"):
                self._attach_comment(current or transaction, stripped[1:])
                continue
            try:
                current = self._parse_posting(stripped, state)
            except AmountParseError as exc:
                raise JournalParseError(line_number, str(exc)) from exc
            transaction.add_posting(current)
        return transaction

    def _parse_posting(self, text: str, state: _ParseState) -> Posting:
        body, comment = split_note(text)
        status = None
        if body[:1] in ("*", "!"):
            status = TransactionStatus.from_marker(body[0])
            body = body[1:].lstrip()

        account_text, amount_text = split_posting_line(body)
        posting_type = PostingType.NORMAL
        if account_text.startswith("(") and account_text.endswith(")"):
            posting_type = PostingType.VIRTUAL
            account_text = account_text[1:-1].strip()
        elif account_text.startswith("[") and account_text.endswith("]"):
            posting_type = PostingType.BRACKETED
            account_text = account_text[1:-1].strip()

        parsed = PostingAmount()
        if amount_text:
            parsed = parse_posting_amount(amount_text, state.commodities)

        posting = Posting(
            account=state.accounts.get_or_create(account_text),
            amount=parsed.amount,
            cost=parsed.cost,
            price=parsed.price,
            balance_assertion=parsed.balance_assertion,
            posting_type=posting_type,
            status=status,
            is_expression=parsed.is_expression,
        )
        if comment:
            self._attach_comment(posting, comment)
        return posting

    @staticmethod
    def _attach_comment(target, comment: str) -> None:
        note, metadata = parse_comment(comment)
        target.metadata.update(metadata)
        if note:
            target.note = note if not target.note else f"{target.note}\n{note}"

    def _complete_transaction(
        self,
        transaction: Transaction,
        state: _ParseState,
    ) -> None:
        """Infer, validate and post a transaction to the running balances."""
        line_number = transaction.line_number
        if len(transaction.postings) < MIN_POSTINGS:
            raise JournalParseError(
                line_number,
                "transaction must have at least 2 postings",
            )

        self._resolve_assignments(transaction, state)
        try:
            infer_elided_amount(transaction, state.commodities.default())
            validate_transaction_balance(transaction)
        except (ElisionError, UnbalancedTransactionError) as exc:
            raise JournalParseError(line_number, str(exc)) from exc

        for posting in transaction.postings:
            if posting.amount is None:
                continue
            running = state.running_balance(posting.account.full_name)
            running.add(posting.amount)
            try:
                check_balance_assertion(posting, running)
            except BalanceAssertionError as exc:
                raise JournalParseError(line_number, str(exc)) from exc

        self._record_posting_prices(transaction)

    @staticmethod
    def _resolve_assignments(
        transaction: Transaction,
        state: _ParseState,
    ) -> None:
        """Give ``= X`` postings without an amount the difference to X."""
        pending: dict[str, Balance] = {}
        for posting in transaction.postings:
            name = posting.account.full_name
            assertion = posting.balance_assertion
            if (
                posting.amount is None
                and assertion is not None
                and assertion.is_assignment
            ):
                current = state.running_balance(name).copy()
                current.add_balance(pending.get(name, Balance()))
                held = current.get(assertion.amount.commodity.symbol)
                posting.amount = (
                    assertion.amount - held if held else assertion.amount
                )
                posting.is_generated = True
            if posting.amount is not None:
                pending.setdefault(name, Balance()).add(posting.amount)

    @staticmethod
    def _record_posting_prices(transaction: Transaction) -> None:
        for posting in transaction.postings:
            if posting.is_expression or posting.amount is None:
                continue
            unit_price = posting.unit_price()
            if unit_price is None:
                continue
            if unit_price.commodity.symbol == posting.amount.commodity.symbol:
                continue
            posting.amount.commodity.add_price(transaction.date, unit_price)

    def _build_directive(self, block: _Block, state: _ParseState) -> Directive:
        body, _ = split_note(block.text)
        keyword, _, argument = body.partition(" ")
        argument = argument.strip()
        sub_lines = [
            (number, line.strip())
            for number, line in block.lines
            if not line.strip().startswith(";")
        ]
        if keyword == "account":
            return self._build_account_directive(block, argument, sub_lines)
        if keyword == "commodity":
            return self._build_commodity_directive(block, argument, sub_lines)
        return self._build_price_directive(block, body, state)

    def _build_account_directive(
        self,
        block: _Block,
        name: str,
        sub_lines: list[tuple[int, str]],
    ) -> AccountDirective:
        if not name:
            raise JournalParseError(block.line_number, "account name missing")
        note = None
        aliases = []
        for number, line in sub_lines:
            key, _, value = line.partition(" ")
            if key == "note":
                note = value.strip()
            elif key == "alias":
                aliases.append(value.strip())
            else:
                self._logger.debug(
                    f"Ignoring account sub-directive on line {number}: {line}"
                )
        return AccountDirective(
            name=name,
            note=note,
            aliases=tuple(aliases),
            line_number=block.line_number,
        )

    def _build_commodity_directive(
        self,
        block: _Block,
        symbol: str,
        sub_lines: list[tuple[int, str]],
    ) -> CommodityDirective:
        if not symbol:
            raise JournalParseError(block.line_number, "commodity symbol missing")
        values: dict[str, object] = {}
        for number, line in sub_lines:
            key, _, value = line.partition(" ")
            if key == "note":
                values["note"] = value.strip()
            elif key == "format":
                values["display_format"] = value.strip()
            elif key == "nomarket":
                values["no_market"] = True
            elif key == "alias":
                values["alias"] = value.strip()
            elif key == "default":
                values["is_default"] = True
            else:
                self._logger.debug(
                    f"Ignoring commodity sub-directive on line {number}: {line}"
                )
        return CommodityDirective(
            symbol=_strip_quotes(symbol),
            line_number=block.line_number,
            **values,
        )

    @staticmethod
    def _build_price_directive(
        block: _Block,
        body: str,
        state: _ParseState,
    ) -> PriceDirective:
        match = PRICE_DIRECTIVE_RE.match(body)
        if match is None:
            raise JournalParseError(
                block.line_number,
                f"invalid price directive: {body}",
            )
        try:
            on_date = parse_date(match.group("date"))
            price = parse_amount_literal(match.group("price"), state.commodities)
        except ValueError as exc:
            raise JournalParseError(block.line_number, str(exc)) from exc
        return PriceDirective(
            date=on_date,
            symbol=_strip_quotes(match.group("symbol")),
            price=price,
            line_number=block.line_number,
        )


__all__ = ["LedgerJournalParser", "parse_comment"]
