"""Helpers for partial updates."""
from typing import Any, Dict, Iterable

from pydantic import BaseModel


def changed_values(updates: BaseModel, nullable_columns: Iterable[str]) -> Dict[str, Any]:
    """
    Collect the fields the client actually sent.

    Omitted fields are skipped so the column keeps its value. An explicit
    null clears a nullable column and is ignored for a NOT NULL one.
    """
    nullable_columns = set(nullable_columns)
    values = {}
    for field in type(updates).model_fields:
        if field not in updates.model_fields_set:
            continue
        value = getattr(updates, field)
        if value is None and field not in nullable_columns:
            continue
        values[field] = value
    return values
