"""Procurement platform CLI entry point running a demo tender round."""

import asyncio
import logging

from .actor import ProcurementActor
from .config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

DEMO_TENDER_ID = "T1"
DEMO_AMOUNTS = [500, 300, 300]


async def run_demo() -> None:
    """Open a tender, collect bids from the demo bidders and award it."""
    issuer = settings.DEMO_ISSUER
    logger.info(f"Issuer: {issuer}")
    logger.info(f"Bidders: {settings.DEMO_BIDDERS}")

    async with ProcurementActor() as actor:
        if not await actor.create_tender(DEMO_TENDER_ID, "Demo tender", caller=issuer):
            logger.error(f"Could not create tender {DEMO_TENDER_ID}")
            return

        for bidder, amount in zip(settings.DEMO_BIDDERS, DEMO_AMOUNTS):
            accepted = await actor.submit_bid(DEMO_TENDER_ID, amount, caller=bidder)
            logger.info(f"  - {bidder} bid {amount}: {'accepted' if accepted else 'rejected'}")

        winner = await actor.award_tender(DEMO_TENDER_ID, caller=issuer)
        if winner is None:
            logger.info("Tender was not awarded.")
            return
        logger.info(f"Tender {DEMO_TENDER_ID} awarded to {winner}")

        for awarded in await actor.get_awarded_tenders():
            logger.info(
                f"  - [{awarded.id}] {awarded.tender.description}: "
                f"{awarded.winning_bid.bidder} at {awarded.winning_bid.amount}"
            )


def main() -> None:
    """Main entry point."""
    try:
        asyncio.run(run_demo())
    except KeyboardInterrupt:
        logger.info("Demo interrupted by user.")
    except Exception:
        logger.exception("Demo failed")
        raise


if __name__ == "__main__":
    main()
