"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidAmountError(DomainException, ValueError):
    """Monetary amount or rate is negative, non-finite, or not an integer where one is required"""

    pass


class BillAmountBelowMinimumError(InvalidAmountError):
    """Bill is smaller than the minimum amount eligible for a payment plan"""

    pass


class BillAmountAboveMaximumError(InvalidAmountError):
    """Bill exceeds the maximum risk exposure for a single plan"""

    pass


class InvalidRatesError(DomainException, ValueError):
    """Business rate configuration violates a pricing invariant"""

    pass
