"""Pydantic models for tenders, bids and audit events."""

from enum import Enum

from pydantic import BaseModel, Field

# Caller principals are carried around in their text form.
# The empty string is the anonymous/invalid identity.
Identity = str

ANONYMOUS: Identity = ""


class TenderStatus(str, Enum):
    """Lifecycle states of a tender.

    ``CLOSED`` is declared for compatibility but no operation produces it;
    tenders go straight from ``OPEN`` to ``AWARDED``.
    """

    OPEN = "Open"
    CLOSED = "Closed"
    AWARDED = "Awarded"


class Tender(BaseModel):
    """A solicitation for bids, owned by its issuer."""

    id: str
    description: str
    issuer: Identity
    created_at: int
    status: TenderStatus = TenderStatus.OPEN


class Bid(BaseModel):
    """An offer submitted against an open tender."""

    tender_id: str
    bidder: Identity
    amount: int = Field(ge=0)
    submitted_at: int


class AwardedTender(BaseModel):
    """An awarded tender together with its recomputed winning bid."""

    id: str
    tender: Tender
    winning_bid: Bid


class Event(BaseModel):
    """A timestamped audit log entry."""

    timestamp: int
    message: str


def placeholder_bid(tender_id: str) -> Bid:
    """Sentinel winning bid for an awarded tender that has lost its bids."""
    return Bid(tender_id=tender_id, bidder=ANONYMOUS, amount=0, submitted_at=0)
