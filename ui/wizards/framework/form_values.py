# -*- coding: utf-8 -*-
"""Helpers shared by the wizards' default value builders."""

import copy
from datetime import date, datetime
from typing import Any, Dict, Iterable, Mapping, Optional


def parse_date(value: Any) -> Optional[date]:
    """Parse an ISO date (or datetime) string coming from the backend."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        return None


def merge_record_values(
    blank: Dict[str, Any],
    form_data: Mapping[str, Any],
    date_fields: Iterable[str] = ()
) -> Dict[str, Any]:
    """
    Overlay persisted form data on blank defaults.

    Unknown keys are dropped and None keeps the blank default, so the
    result always has exactly the keys of the form schema.
    """
    values = dict(blank)
    for key in blank:
        stored = form_data.get(key)
        if stored is not None:
            values[key] = copy.deepcopy(stored)
    for key in date_fields:
        if key in values:
            values[key] = parse_date(values[key])
    return values


def first_of(source: Mapping[str, Any], *keys: str, default: Any = "") -> Any:
    """First truthy value among ``keys`` (customer prefill fallbacks)."""
    for key in keys:
        value = source.get(key)
        if value:
            return value
    return default
