"""Validation rules for company creation payloads."""

from __future__ import annotations

import re

from company_api.errors import InvalidCompanyError
from company_api.schemas import CompanyPostModel


def _display_name(field: str) -> str:
    # "MaticniBroj" -> "Maticni Broj"
    return re.sub(r"(?<=[a-z])(?=[A-Z])", " ", field)


class CompanyValidator:
    def __init__(self):
        # (attribute, wire name, exact length, custom message)
        self.rules = [
            ("name", "Name", None, "Company name is required"),
            ("pib", "Pib", 9, "Pib must be 9 characters long."),
            ("maticni_broj", "MaticniBroj", 8, "Maticni broj must be 8 characters long."),
        ]

    def validate_not_empty(self, value) -> bool:
        return isinstance(value, str) and bool(value.strip())

    def validate_length(self, value, length: int) -> bool:
        return len(value or "") == length

    def validate(self, payload: CompanyPostModel) -> dict[str, list[str]]:
        errors: dict[str, list[str]] = {}
        for attr, wire_name, length, message in self.rules:
            value = getattr(payload, attr)
            field_errors = []
            if length is None:
                if not self.validate_not_empty(value):
                    field_errors.append(message)
            else:
                if not self.validate_not_empty(value):
                    field_errors.append(f"'{_display_name(wire_name)}' must not be empty.")
                # Omitted fields bind as "", which fails the length rule too
                if not self.validate_length(value, length):
                    field_errors.append(message)
            if field_errors:
                errors[wire_name] = field_errors
        return errors

    def ensure_valid(self, payload: CompanyPostModel):
        errors = self.validate(payload)
        if errors:
            raise InvalidCompanyError(errors)
