"""Lowest-bid selection."""

from typing import Iterable, Optional

from .models import Bid


def select_lowest_bid(bids: Iterable[Bid]) -> Optional[Bid]:
    """Return the bid with the smallest amount, or None for no bids.

    Ties go to the bid seen first: a later bid only wins when it is strictly
    lower than the current one.
    """
    winner: Optional[Bid] = None
    for bid in bids:
        if winner is None or bid.amount < winner.amount:
            winner = bid
    return winner
