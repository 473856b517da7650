"""Procurement platform - tenders, bids and lowest-bid awards.

An in-memory service where issuers open tenders, bidders submit bids and
issuers award each tender to its lowest bid.
"""

from .actor import ProcurementActor
from .award import select_lowest_bid
from .bid_store import BidStore, bid_key
from .config import settings
from .events import EventLog
from .exceptions import (
    DuplicateTenderError,
    InvalidBidError,
    InvalidTenderError,
    NoBidsError,
    NotIssuerError,
    ProcurementError,
    RejectedError,
    TenderNotFoundError,
    TenderNotOpenError,
)
from .models import AwardedTender, Bid, Event, Identity, Tender, TenderStatus
from .service import ProcurementService
from .tender_store import TenderStore

__all__ = [
    # Service
    "ProcurementService",
    "ProcurementActor",
    # Stores
    "TenderStore",
    "BidStore",
    "bid_key",
    "EventLog",
    # Award
    "select_lowest_bid",
    # Models
    "Identity",
    "TenderStatus",
    "Tender",
    "Bid",
    "AwardedTender",
    "Event",
    # Config
    "settings",
    # Exceptions
    "ProcurementError",
    "RejectedError",
    "InvalidTenderError",
    "DuplicateTenderError",
    "TenderNotFoundError",
    "TenderNotOpenError",
    "NotIssuerError",
    "NoBidsError",
    "InvalidBidError",
]

__version__ = "0.1.0"
