"""Use cases listing accounts, payees and commodities."""

from ledgerlite.application.journal import Journal


class ListAccountsUseCase:
    """List accounts that received postings."""

    def __init__(self, journal: Journal) -> None:
        self._journal = journal

    def execute(self, pattern: str | None = None) -> list[str]:
        if pattern:
            return self._journal.accounts_matching(pattern)
        return self._journal.all_accounts()


class ListPayeesUseCase:
    """List unique transaction payees."""

    def __init__(self, journal: Journal) -> None:
        self._journal = journal

    def execute(self, pattern: str | None = None) -> list[str]:
        if pattern:
            return self._journal.payees_matching(pattern)
        return self._journal.all_payees()


class ListCommoditiesUseCase:
    """List commodities, optionally those posted to matching accounts."""

    def __init__(self, journal: Journal) -> None:
        self._journal = journal

    def execute(self, account_pattern: str | None = None) -> list[str]:
        if account_pattern:
            return self._journal.commodities_for_account(account_pattern)
        return self._journal.all_commodities()


__all__ = ["ListAccountsUseCase", "ListPayeesUseCase", "ListCommoditiesUseCase"]
