"""In-memory table of tenders keyed by tender id."""

from typing import Dict, List, Optional, Tuple

from .exceptions import DuplicateTenderError, InvalidTenderError
from .models import Identity, Tender, TenderStatus


class TenderStore:
    """Owns every tender known to the service.

    Tenders are created only through :meth:`create` and never deleted.
    """

    def __init__(self) -> None:
        self._tenders: Dict[str, Tender] = {}

    def __len__(self) -> int:
        return len(self._tenders)

    def __contains__(self, tender_id: object) -> bool:
        return tender_id in self._tenders

    def create(
        self, tender_id: str, description: str, issuer: Identity, now: int
    ) -> Tender:
        """Insert a new open tender.

        Raises:
            InvalidTenderError: If the id or description is empty.
            DuplicateTenderError: If a tender with this id already exists.
        """
        if not tender_id or not description:
            raise InvalidTenderError("Tender id and description must be non-empty")
        if tender_id in self._tenders:
            raise DuplicateTenderError(f"Tender {tender_id!r} already exists")

        tender = Tender(
            id=tender_id,
            description=description,
            issuer=issuer,
            created_at=now,
            status=TenderStatus.OPEN,
        )
        self._tenders[tender_id] = tender
        return tender

    def get(self, tender_id: str) -> Optional[Tender]:
        return self._tenders.get(tender_id)

    def put(self, tender_id: str, tender: Tender) -> None:
        """Replace a stored tender. Only the award transition uses this.

        Raises:
            ValueError: If the ids differ or the tender is not awarded.
        """
        if tender.id != tender_id:
            raise ValueError(f"Tender id mismatch: {tender.id!r} != {tender_id!r}")
        if tender.status != TenderStatus.AWARDED:
            raise ValueError(
                f"Tender {tender_id!r} can only be replaced once awarded, "
                f"got {tender.status.value}"
            )
        self._tenders[tender_id] = tender

    def list_all(self) -> List[Tuple[str, Tender]]:
        """Return every (id, tender) pair. Order is not part of the contract."""
        return list(self._tenders.items())
