"""
Bid storage keyed by a composite of tender, bidder and submission time.
Lookups by tender are full scans; no secondary index is maintained.
"""

import logging
from typing import Dict, List, Tuple

from .exceptions import InvalidBidError, TenderNotFoundError, TenderNotOpenError
from .models import Bid, Identity, TenderStatus
from .tender_store import TenderStore

logger = logging.getLogger(__name__)


def _key_parts(
    tender_id: str, bidder: Identity, submitted_at: object
) -> Tuple[str, str, str]:
    raw = str(submitted_at)
    try:
        timestamp_text = str(int(raw))
    except ValueError:
        logger.debug(f"Timestamp {raw!r} is not integral, using raw text in key")
        timestamp_text = raw
    return tender_id, bidder, timestamp_text


def bid_key(tender_id: str, bidder: Identity, submitted_at: object) -> str:
    """Build the text key ``"<tenderId>-<bidder>-<timestamp>"``.

    The timestamp is normalised through an int round-trip. Values that do not
    survive it (floats, dates, arbitrary text) fall back to their raw text.
    The store itself only sees integer timestamps, so the fallback applies to
    direct callers.
    """
    return "-".join(_key_parts(tender_id, bidder, submitted_at))


class BidStore:
    """Owns every bid, validating submissions against a :class:`TenderStore`.

    Bids are stored under the (tender, bidder, timestamp) triple rather than
    the joined text of :func:`bid_key`, so ids containing ``-`` cannot collide
    across tenders. Two submissions with the same tender, bidder and timestamp
    still share a key and the later one silently replaces the earlier one.
    """

    def __init__(self, tenders: TenderStore) -> None:
        self._tenders = tenders
        self._bids: Dict[Tuple[str, str, str], Bid] = {}

    def __len__(self) -> int:
        return len(self._bids)

    def submit(self, tender_id: str, bidder: Identity, amount: int, now: int) -> Bid:
        """Store a bid against an open tender.

        Raises:
            TenderNotFoundError: If the tender does not exist.
            TenderNotOpenError: If the tender is not open.
            InvalidBidError: If the amount is negative.
        """
        tender = self._tenders.get(tender_id)
        if tender is None:
            raise TenderNotFoundError(f"Tender {tender_id!r} does not exist")
        if tender.status != TenderStatus.OPEN:
            raise TenderNotOpenError(
                f"Tender {tender_id!r} is {tender.status.value}, not accepting bids"
            )
        if amount < 0:
            raise InvalidBidError(f"Bid amount must be non-negative, got {amount}")

        bid = Bid(tender_id=tender_id, bidder=bidder, amount=amount, submitted_at=now)
        key = _key_parts(tender_id, bidder, now)
        if key in self._bids:
            logger.warning(f"Bid key {'-'.join(key)!r} already present, overwriting")
        self._bids[key] = bid
        return bid

    def list_for_tender(self, tender_id: str) -> List[Bid]:
        """Return all bids for a tender in storage order."""
        return [bid for bid in self._bids.values() if bid.tender_id == tender_id]
