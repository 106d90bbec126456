"""Account use cases."""

from __future__ import annotations

import logging
from typing import Sequence

from eventledger.application.commands import CreateAccountCommand
from eventledger.application.queries import (
    GetAccountByNumberQuery,
    GetAccountQuery,
    ListAccountsQuery,
)
from eventledger.domain.accounts import Account, AccountRepository
from eventledger.domain.common import AccountNumber
from eventledger.domain.errors import DuplicateAccountNumberError

logger = logging.getLogger(__name__)


class CreateAccountHandler:
    def __init__(self, account_repository: AccountRepository) -> None:
        self._accounts = account_repository

    async def handle(self, command: CreateAccountCommand) -> Account:
        logger.info(
            "Creating account: number=%s, name=%s",
            command.account_number,
            command.account_name,
        )
        account_number = AccountNumber(command.account_number)

        # Not atomic with the insert; the unique constraint on the store
        # settles concurrent creations.
        if await self._accounts.exists_by_account_number(account_number):
            logger.warning("Account number already exists: %s", account_number)
            raise DuplicateAccountNumberError(account_number.value)

        account = Account(account_number=account_number, account_name=command.account_name)
        account.validate()

        saved = await self._accounts.save(account)
        logger.info("Account created successfully: id=%s", saved.id)
        return saved


class GetAccountHandler:
    def __init__(self, account_repository: AccountRepository) -> None:
        self._accounts = account_repository

    async def handle(self, query: GetAccountQuery) -> Account:
        logger.info("Getting account by id: %s", query.account_id)
        return await self._accounts.find_by_id(query.account_id)

    async def handle_by_number(self, query: GetAccountByNumberQuery) -> Account:
        logger.info("Getting account by number: %s", query.account_number)
        account_number = AccountNumber(query.account_number)
        return await self._accounts.find_by_account_number(account_number)


class ListAccountsHandler:
    def __init__(self, account_repository: AccountRepository) -> None:
        self._accounts = account_repository

    async def handle(self, query: ListAccountsQuery) -> Sequence[Account]:
        logger.info("Listing all accounts")
        return await self._accounts.find_all()
