"""Normalize decoded model output into a ResolvedEntry."""

import math
from collections.abc import Mapping

from calorie_tracker.domain.entries import EntryKind, ResolvedEntry
from calorie_tracker.domain.errors import ResolutionError, ResolutionErrorKind

_KIND_KEYS = ("type", "kind")
_CALORIE_KEYS = ("calories", "kcal", "calories_kcal")
_MACRO_KEYS: dict[str, tuple[str, ...]] = {
    "protein": ("protein", "protein_g"),
    "fat": ("fat", "fat_g"),
    "carbs": ("carbs", "carbs_g", "carbohydrates"),
}


def normalize_entry(source: object) -> ResolvedEntry:
    """Coerce an untyped object into a ResolvedEntry.

    Absent macros stay absent; present values that are not numeric become 0.
    """
    if not isinstance(source, Mapping):
        raise _violation("decoded value is not an object")

    kind = _parse_kind(source)

    name = source.get("name")
    if not isinstance(name, str) or not name.strip():
        raise _violation("missing name")

    calories_key = _first_present(source, _CALORIE_KEYS)
    if calories_key is None:
        raise _violation("missing calories")

    macros: dict[str, float] = {}
    for field_name, keys in _MACRO_KEYS.items():
        key = _first_present(source, keys)
        if key is not None:
            macros[field_name] = coerce_number(source[key])

    return ResolvedEntry(
        kind=kind,
        name=name.strip(),
        calories=coerce_number(source[calories_key]),
        **macros,
    )


def coerce_number(value: object) -> float:
    """Return `value` as a finite float, or 0.0 when it is not numeric."""
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, int | float):
        try:
            number = float(value)
        except OverflowError:
            return 0.0
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return 0.0
    else:
        return 0.0
    return number if math.isfinite(number) else 0.0


def _parse_kind(source: Mapping[str, object]) -> EntryKind:
    key = _first_present(source, _KIND_KEYS)
    raw = source.get(key) if key else None
    if isinstance(raw, str):
        try:
            return EntryKind(raw.strip().lower())
        except ValueError:
            pass
    raise _violation(f"unrecognized entry type: {raw!r}")


def _first_present(source: Mapping[str, object], keys: tuple[str, ...]) -> str | None:
    for key in keys:
        if key in source:
            return key
    return None


def _violation(detail: str) -> ResolutionError:
    return ResolutionError(ResolutionErrorKind.SCHEMA_VIOLATION, detail)
