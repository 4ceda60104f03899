"""Amortization engine exceptions."""


class AmortizationError(Exception):
    """Base exception for the amortization engine"""

    pass


class InvalidArgumentError(AmortizationError, ValueError):
    """A debt parameter is non-positive or not a number"""

    def __init__(self, name: str, value: object, reason: str = "must be a positive number"):
        self.name = name
        self.value = value
        super().__init__(f"{name} {reason}, got {value!r}")
