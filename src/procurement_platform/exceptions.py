"""Custom exceptions for the procurement platform."""


class ProcurementError(Exception):
    """Base exception for all procurement platform errors."""


class RejectedError(ProcurementError):
    """Base exception for expected policy violations.

    The public operations turn these into a plain ``False`` / ``None``.
    """


class InvalidTenderError(RejectedError):
    """Raised when a tender id or description is empty."""


class DuplicateTenderError(RejectedError):
    """Raised when a tender id is already taken."""


class TenderNotFoundError(RejectedError):
    """Raised when a referenced tender does not exist."""


class TenderNotOpenError(RejectedError):
    """Raised when a tender is no longer accepting bids or awards."""


class NotIssuerError(RejectedError):
    """Raised when someone other than the issuer tries to award a tender."""


class NoBidsError(RejectedError):
    """Raised when a tender has no bids to award."""


class InvalidBidError(RejectedError):
    """Raised when a bid amount is negative."""
