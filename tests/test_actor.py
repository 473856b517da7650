"""Tests for the async actor facade."""

import pytest

from procurement_platform.actor import ProcurementActor
from procurement_platform.main import run_demo
from procurement_platform.service import ProcurementService


@pytest.mark.asyncio
async def test_actor_full_round():
    async with ProcurementActor() as actor:
        assert await actor.create_tender("T1", "desc", caller="city")
        assert await actor.submit_bid("T1", 500, caller="A")
        assert await actor.submit_bid("T1", 300, caller="B")
        assert await actor.submit_bid("T1", 300, caller="C")

        assert await actor.award_tender("T1", caller="A") is None
        assert await actor.award_tender("T1", caller="city") == "B"
        assert not await actor.submit_bid("T1", 1, caller="D")

        tenders = await actor.get_tenders()
        assert [tender_id for tender_id, _ in tenders] == ["T1"]
        assert len(await actor.get_bids("T1")) == 3

        awarded = await actor.get_awarded_tenders()
        assert awarded[0].winning_bid.bidder == "B"


@pytest.mark.asyncio
async def test_actor_shares_service():
    service = ProcurementService()
    actor = ProcurementActor(service)

    await actor.create_tender("T1", "desc", caller="city")

    assert service.get_tender("T1") is not None
    assert len(service.event_log) == 1


@pytest.mark.asyncio
async def test_run_demo_awards_tender(caplog):
    caplog.set_level("INFO", logger="procurement_platform.main")

    await run_demo()

    assert "awarded to bidder-b" in caplog.text
