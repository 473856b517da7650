"""Async call boundary in front of the procurement service."""

import logging
from typing import List, Optional, Tuple

from .models import AwardedTender, Bid, Identity, Tender
from .service import ProcurementService

logger = logging.getLogger(__name__)


class ProcurementActor:
    """Async facade that threads the caller identity into each operation.

    Every method delegates synchronously to the wrapped service, so a call
    never suspends in the middle of a mutation and runs atomically with
    respect to other calls on the same event loop.

    Usage:
        async with ProcurementActor() as actor:
            await actor.create_tender("T1", "Road repair", caller="city")
            await actor.submit_bid("T1", 500, caller="builder")
            winner = await actor.award_tender("T1", caller="city")
    """

    def __init__(self, service: Optional[ProcurementService] = None) -> None:
        self.service = service if service is not None else ProcurementService()

    async def __aenter__(self) -> "ProcurementActor":
        """Enter async context manager."""
        return self

    async def __aexit__(self, *args: object) -> None:
        """Exit async context manager."""
        logger.debug(f"Actor closed with {len(self.service.event_log)} events")

    async def create_tender(
        self, tender_id: str, description: str, caller: Identity
    ) -> bool:
        return self.service.create_tender(tender_id, description, caller)

    async def submit_bid(self, tender_id: str, amount: int, caller: Identity) -> bool:
        return self.service.submit_bid(tender_id, amount, caller)

    async def award_tender(self, tender_id: str, caller: Identity) -> Optional[Identity]:
        return self.service.award_tender(tender_id, caller)

    async def get_tenders(self) -> List[Tuple[str, Tender]]:
        return self.service.get_tenders()

    async def get_bids(self, tender_id: str) -> List[Bid]:
        return self.service.get_bids(tender_id)

    async def get_awarded_tenders(self) -> List[AwardedTender]:
        return self.service.get_awarded_tenders()
