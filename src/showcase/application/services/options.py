"""Selector option derivation for categorical filters."""

from __future__ import annotations

import unicodedata
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from showcase.domain.catalogs import FilterSpec
from showcase.domain.models.core import SelectOption


def _char_rank(ch: str) -> int:
    if ch.isalpha():
        return 2
    if ch.isdigit():
        return 1
    return 0


def label_sort_key(label: str) -> Tuple[Tuple[int, str], ...]:
    """Collation key comparing labels the way a base-strength locale compare does.

    Case and accents are ignored (``"Éclair"`` sorts with ``"eclair"``).
    Spaces, punctuation and symbols sort before digits, and digits before
    letters, matching the root collation order.
    """
    decomposed = unicodedata.normalize("NFKD", label or "")
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return tuple((_char_rank(ch), ch) for ch in stripped.casefold())


def all_option(category: str) -> SelectOption:
    return SelectOption("", f"All {category}")


def _record_label(record: Mapping[str, Any], label_fields: Sequence[str]) -> str:
    for name in label_fields:
        value = record.get(name)
        if value:
            return str(value)
    return ""


def derive_options(
    records: Iterable[Mapping[str, Any]],
    category: str,
    label_fields: Sequence[str] = ("name",),
    value_field: str = "id",
) -> List[SelectOption]:
    """Build selector options from a reference list.

    The synthetic "All <category>" option comes first, followed by the
    records sorted by label with case and accents ignored.  Values are
    stringified so they compare equal to stored filter values.
    """
    options = [
        SelectOption(str(record.get(value_field, "")), _record_label(record, label_fields))
        for record in records or []
    ]
    options.sort(key=lambda option: label_sort_key(option.label))
    return [all_option(category), *options]


def static_options(spec: FilterSpec) -> List[SelectOption]:
    """Options for a selector with a fixed set of choices."""
    choices = list(spec.choices)
    if spec.sort_choices:
        choices.sort(key=lambda option: label_sort_key(option.label))
    return [all_option(spec.category), *choices]


def resolve_selected_option(
    options: Sequence[SelectOption], value: Optional[str]
) -> Optional[SelectOption]:
    """Return the option whose value equals *value*, else the leading "All" option."""
    if not options:
        return None
    wanted = "" if value is None else str(value)
    for option in options:
        if option.value == wanted:
            return option
    return options[0]


__all__ = [
    "all_option",
    "derive_options",
    "label_sort_key",
    "resolve_selected_option",
    "static_options",
]
