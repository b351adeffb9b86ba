class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidDateRange(ValidationError):
    """Raised when a line item ends before it becomes effective."""


class UnsupportedCountry(DomainError):
    """Raised when no statutory rule evaluator is registered for a country."""

    def __init__(self, country_code):
        self.country_code = country_code
        super().__init__(f"Unsupported country code: {country_code}")


class PayrollRunError(DomainError):
    """Raised when a payroll run cannot start (unknown or closed period)."""
