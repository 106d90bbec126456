"""Pydantic request/response schemas for the ledger API."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class CreateAccountRequest(BaseModel):
    account_number: str
    account_name: str


class CreateLedgerEventRequest(BaseModel):
    account_id: int
    event_type: str = Field(..., description="DEBIT or CREDIT, case-insensitive")
    amount: int
    description: Optional[str] = None


class CreateBalanceSnapshotRequest(BaseModel):
    account_id: int


class AccountResponse(BaseModel):
    id: Optional[int]
    account_number: str
    account_name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AccountListResponse(BaseModel):
    accounts: list[AccountResponse]
    count: int


class LedgerEventResponse(BaseModel):
    id: Optional[int]
    account_id: int
    event_type: str
    amount: int
    description: Optional[str] = None
    created_at: Optional[datetime] = None


class LedgerEventListResponse(BaseModel):
    events: list[LedgerEventResponse]
    count: int


class AccountBalanceResponse(BaseModel):
    id: Optional[int] = None
    account_id: int
    balance: int
    snapshot_at: Optional[datetime] = None


class BalanceSnapshotListResponse(BaseModel):
    snapshots: list[AccountBalanceResponse]
    count: int
