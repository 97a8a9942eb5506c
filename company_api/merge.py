"""
Partial-update merge of a CompanyPostModel into a persisted Company.

Two strategies, selected per request:

    reflection -- walk the patch model's declared fields at runtime and copy
                  each meaningful value onto the same-named mapped column.
    mapping    -- evaluate the static COMPANY_FIELD_MAP table; adding a field
                  requires a new rule.

A value is meaningful when it is not None and, for strings, not blank.
The primary key is never written by either strategy.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Callable

from pydantic import BaseModel
from sqlalchemy import inspect

from company_api.models import Company
from company_api.schemas import CompanyPostModel

logger = logging.getLogger(__name__)


class MergeStrategy(str, enum.Enum):
    REFLECTION = "reflection"
    MAPPING = "mapping"


def is_provided(value: Any) -> bool:
    """False for None, empty and whitespace-only strings."""
    if value is None:
        return False
    if isinstance(value, str) and not value.strip():
        return False
    return True


# ---------------------------------------------------------------------------
# Reflection
# ---------------------------------------------------------------------------

def merge_by_reflection(entity: Any, patch: BaseModel) -> Any:
    mapper = inspect(entity).mapper
    writable = {attr.key for attr in mapper.column_attrs}
    primary = {mapper.get_property_by_column(col).key for col in mapper.primary_key}

    for field_name in type(patch).model_fields:
        value = getattr(patch, field_name)
        if not is_provided(value):
            continue
        if field_name in primary or field_name not in writable:
            logger.debug("Skipping %s: no writable column on %s", field_name, mapper.class_.__name__)
            continue
        setattr(entity, field_name, value)
    return entity


# ---------------------------------------------------------------------------
# Declarative mapping
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FieldRule:
    source: str
    destination: str
    condition: Callable[[Any], bool] = is_provided


COMPANY_FIELD_MAP: tuple[FieldRule, ...] = (
    FieldRule("name", "name"),
    FieldRule("city", "city"),
    FieldRule("street", "street"),
    FieldRule("pib", "pib"),
    FieldRule("maticni_broj", "maticni_broj"),
    FieldRule("is_active", "is_active"),
)


def apply_field_map(entity: Any, patch: Any, rules: tuple[FieldRule, ...]) -> Any:
    for rule in rules:
        value = getattr(patch, rule.source)
        if rule.condition(value):
            setattr(entity, rule.destination, value)
    return entity


def merge_by_mapping(entity: Company, patch: CompanyPostModel) -> Company:
    return apply_field_map(entity, patch, COMPANY_FIELD_MAP)


# ---------------------------------------------------------------------------
# Merger
# ---------------------------------------------------------------------------

class CompanyMerger:
    """Applies a patch to a Company with the requested strategy."""

    def __init__(self, default_strategy: MergeStrategy = MergeStrategy.REFLECTION):
        self.default_strategy = default_strategy
        self._strategies = {
            MergeStrategy.REFLECTION: merge_by_reflection,
            MergeStrategy.MAPPING: merge_by_mapping,
        }

    def merge(
        self,
        existing: Company,
        patch: CompanyPostModel,
        strategy: MergeStrategy | None = None,
    ) -> Company:
        strategy = MergeStrategy(strategy or self.default_strategy)
        return self._strategies[strategy](existing, patch)
