"""Hierarchical account namespace."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ledgerlite.domain.constants import ACCOUNT_SEPARATOR


class AccountType(str, Enum):
    """Classification derived from an account's top-level segment."""

    ASSET = "asset"
    LIABILITY = "liability"
    EQUITY = "equity"
    INCOME = "income"
    EXPENSE = "expense"


_TYPE_PREFIXES = (
    ("asset", AccountType.ASSET),
    ("liabilit", AccountType.LIABILITY),
    ("equit", AccountType.EQUITY),
    ("income", AccountType.INCOME),
    ("revenue", AccountType.INCOME),
    ("expense", AccountType.EXPENSE),
)


def determine_account_type(full_name: str) -> AccountType:
    """Classify an account from its first segment, defaulting to asset."""
    first = top_level_name(full_name).lower()
    for prefix, account_type in _TYPE_PREFIXES:
        if first.startswith(prefix):
            return account_type
    return AccountType.ASSET


def split_account_name(full_name: str) -> list[str]:
    return full_name.split(ACCOUNT_SEPARATOR)


def parent_name_of(full_name: str) -> str | None:
    """Return everything before the last separator, or None at top level."""
    if ACCOUNT_SEPARATOR not in full_name:
        return None
    return full_name.rsplit(ACCOUNT_SEPARATOR, 1)[0]


def leaf_name_of(full_name: str) -> str:
    return full_name.rsplit(ACCOUNT_SEPARATOR, 1)[-1]


def top_level_name(full_name: str) -> str:
    return full_name.split(ACCOUNT_SEPARATOR, 1)[0]


def is_same_or_descendant(full_name: str, ancestor: str) -> bool:
    """Return True for ``ancestor`` itself and any account below it."""
    return full_name == ancestor or full_name.startswith(
        ancestor + ACCOUNT_SEPARATOR
    )


@dataclass(eq=False)
class Account:
    """A node of the account tree.

    ``parent_name`` is the parent's full name rather than a reference, so
    the tree is owned top-down through ``children`` only.
    """

    name: str
    full_name: str
    account_type: AccountType = AccountType.ASSET
    parent_name: str | None = None
    children: list[Account] = field(default_factory=list)
    note: str | None = None

    @property
    def depth(self) -> int:
        if not self.full_name:
            return 0
        return len(split_account_name(self.full_name))

    def find_child(self, name: str) -> Account | None:
        for child in self.children:
            if child.name == name:
                return child
        return None

    def add_child(self, name: str) -> Account:
        full_name = (
            f"{self.full_name}{ACCOUNT_SEPARATOR}{name}"
            if self.full_name
            else name
        )
        child = Account(
            name=name,
            full_name=full_name,
            account_type=determine_account_type(full_name),
            parent_name=self.full_name or None,
        )
        self.children.append(child)
        return child

    def is_descendant_of(self, ancestor_name: str) -> bool:
        if not ancestor_name:
            return bool(self.full_name)
        return self.full_name != ancestor_name and is_same_or_descendant(
            self.full_name,
            ancestor_name,
        )

    def __repr__(self) -> str:
        return f"Account({self.full_name!r})"


class AccountTree:
    """Accounts of one journal rooted at an empty-named root."""

    def __init__(self) -> None:
        self.root = Account(name="", full_name="")
        self._accounts: dict[str, Account] = {}
        self._aliases: dict[str, str] = {}

    def __contains__(self, full_name: str) -> bool:
        return full_name in self._accounts

    def __len__(self) -> int:
        return len(self._accounts)

    def resolve(self, name: str) -> str:
        """Return the full name an alias points at, or ``name`` itself."""
        return self._aliases.get(name, name)

    def add_alias(self, alias: str, full_name: str) -> None:
        self._aliases[alias] = full_name

    def find(self, full_name: str) -> Account | None:
        if not full_name:
            return self.root
        return self._accounts.get(self.resolve(full_name))

    def get_or_create(self, full_name: str) -> Account:
        """Return the account, creating it and any missing ancestors."""
        resolved = self.resolve(full_name)
        existing = self._accounts.get(resolved)
        if existing is not None:
            return existing
        current = self.root
        for segment in split_account_name(resolved):
            child = current.find_child(segment)
            if child is None:
                child = current.add_child(segment)
                self._accounts[child.full_name] = child
            current = child
        return current

    def parent_of(self, account: Account) -> Account | None:
        if account.parent_name is None:
            return self.root if account.full_name else None
        return self._accounts.get(account.parent_name)

    def names(self) -> list[str]:
        return sorted(self._accounts)

    def all(self) -> list[Account]:
        return [self._accounts[name] for name in self.names()]


__all__ = [
    "AccountType",
    "Account",
    "AccountTree",
    "determine_account_type",
    "split_account_name",
    "parent_name_of",
    "leaf_name_of",
    "top_level_name",
    "is_same_or_descendant",
]
