"""Domain errors raised by the service and validator layers."""

from __future__ import annotations


class CompanyNotFoundError(LookupError):
    """No company row exists for the requested id."""

    def __init__(self, company_id: int):
        super().__init__("Company not found.")
        self.company_id = company_id


class InvalidCompanyError(ValueError):
    """Caller-supplied company data failed one or more validation rules."""

    def __init__(self, errors: dict[str, list[str]]):
        super().__init__("One or more validation errors occurred.")
        self.errors = errors
