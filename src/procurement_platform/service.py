"""
Procurement service: the public tender/bid operations.

Owns the tender and bid stores and the audit log. Policy violations raised by
the stores are collapsed into plain ``False`` / ``None`` results; their reason
only shows up in the logs.
"""

import logging
import time
from typing import Callable, List, Optional, Tuple

from .award import select_lowest_bid
from .bid_store import BidStore
from .events import EventLog
from .exceptions import (
    NoBidsError,
    NotIssuerError,
    RejectedError,
    TenderNotFoundError,
    TenderNotOpenError,
)
from .models import (
    AwardedTender,
    Bid,
    Identity,
    Tender,
    TenderStatus,
    placeholder_bid,
)
from .tender_store import TenderStore

logger = logging.getLogger(__name__)


class ProcurementService:
    """Tender lifecycle and lowest-bid awards over in-memory stores.

    Usage:
        service = ProcurementService()
        service.create_tender("T1", "Office chairs", caller="issuer")
        service.submit_bid("T1", 300, caller="bidder-a")
        winner = service.award_tender("T1", caller="issuer")
    """

    def __init__(
        self,
        event_log: Optional[EventLog] = None,
        clock: Callable[[], int] = time.time_ns,
    ) -> None:
        self._tenders = TenderStore()
        self._bids = BidStore(self._tenders)
        self.event_log = event_log if event_log is not None else EventLog()
        self._clock = clock

    def _now(self, now: Optional[int]) -> int:
        # Timestamps are stored as whole clock units; fractions are dropped.
        return int(self._clock() if now is None else now)

    def create_tender(
        self,
        tender_id: str,
        description: str,
        caller: Identity,
        now: Optional[int] = None,
    ) -> bool:
        """Open a new tender issued by ``caller``.

        Returns:
            True if the tender was created, False if it was rejected.
        """
        timestamp = self._now(now)
        try:
            self._tenders.create(tender_id, description, caller, timestamp)
        except RejectedError as e:
            logger.info(f"Tender creation rejected: {e}")
            return False

        self.event_log.append(timestamp, f"Tender created: {tender_id}")
        logger.info(f"Tender {tender_id!r} created by {caller!r}")
        return True

    def submit_bid(
        self,
        tender_id: str,
        amount: int,
        caller: Identity,
        now: Optional[int] = None,
    ) -> bool:
        """Submit a bid from ``caller`` against an open tender.

        Returns:
            True if the bid was stored, False if it was rejected.
        """
        try:
            self._bids.submit(tender_id, caller, amount, self._now(now))
        except RejectedError as e:
            logger.info(f"Bid rejected: {e}")
            return False

        logger.info(f"Bid of {amount} on tender {tender_id!r} from {caller!r}")
        return True

    def award_tender(
        self,
        tender_id: str,
        caller: Identity,
        now: Optional[int] = None,
    ) -> Optional[Identity]:
        """Award a tender to its lowest bid.

        Only the issuer may award, and only while the tender is open and has
        at least one bid.

        Returns:
            The winning bidder, or None if the award was rejected.
        """
        try:
            winning_bid = self._award(tender_id, caller, self._now(now))
        except RejectedError as e:
            logger.info(f"Award rejected: {e}")
            return None
        return winning_bid.bidder

    def _award(self, tender_id: str, caller: Identity, timestamp: int) -> Bid:
        tender = self._tenders.get(tender_id)
        if tender is None:
            raise TenderNotFoundError(f"Tender {tender_id!r} does not exist")
        if tender.issuer != caller:
            raise NotIssuerError(f"{caller!r} is not the issuer of tender {tender_id!r}")
        if tender.status != TenderStatus.OPEN:
            raise TenderNotOpenError(f"Tender {tender_id!r} is {tender.status.value}")

        winning_bid = select_lowest_bid(self._bids.list_for_tender(tender_id))
        if winning_bid is None:
            raise NoBidsError(f"Tender {tender_id!r} has no bids")

        self._tenders.put(
            tender_id, tender.model_copy(update={"status": TenderStatus.AWARDED})
        )
        self.event_log.append(
            timestamp,
            f"Tender awarded: {tender_id} to {winning_bid.bidder} "
            f"for {winning_bid.amount}",
        )
        logger.info(
            f"Tender {tender_id!r} awarded to {winning_bid.bidder!r} "
            f"at {winning_bid.amount}"
        )
        return winning_bid

    def get_tender(self, tender_id: str) -> Optional[Tender]:
        tender = self._tenders.get(tender_id)
        return tender.model_copy() if tender is not None else None

    def get_tenders(self) -> List[Tuple[str, Tender]]:
        """All tenders as (id, tender) pairs, in no particular order."""
        return [(tender_id, t.model_copy()) for tender_id, t in self._tenders.list_all()]

    def get_bids(self, tender_id: str) -> List[Bid]:
        return [bid.model_copy() for bid in self._bids.list_for_tender(tender_id)]

    def get_awarded_tenders(self) -> List[AwardedTender]:
        """Every awarded tender with its lowest bid recomputed from storage.

        An awarded tender without bids gets a placeholder winning bid with an
        anonymous bidder and zero amount.
        """
        awarded: List[AwardedTender] = []
        for tender_id, tender in self._tenders.list_all():
            if tender.status != TenderStatus.AWARDED:
                continue
            winning_bid = select_lowest_bid(self._bids.list_for_tender(tender_id))
            if winning_bid is None:
                logger.warning(f"Awarded tender {tender_id!r} has no bids")
                winning_bid = placeholder_bid(tender_id)
            awarded.append(
                AwardedTender(
                    id=tender_id,
                    tender=tender.model_copy(),
                    winning_bid=winning_bid.model_copy(),
                )
            )
        return awarded
