"""Tests for entry normalization."""

import pytest

from calorie_tracker.domain.entries import EntryKind, ResolvedEntry
from calorie_tracker.domain.errors import ResolutionError, ResolutionErrorKind
from calorie_tracker.services.normalization import coerce_number, normalize_entry


def test_normalizes_full_meal() -> None:
    entry = normalize_entry(
        {
            "type": "meal",
            "name": "rice (150g)",
            "calories": 180,
            "protein": 4,
            "fat": 0,
            "carbs": 40,
        }
    )

    assert entry == ResolvedEntry(
        kind=EntryKind.MEAL,
        name="rice (150g)",
        calories=180,
        protein=4,
        fat=0,
        carbs=40,
    )


def test_string_calories_and_no_macros() -> None:
    entry = normalize_entry({"type": "workout", "name": "Run 3km", "calories": "250"})

    assert entry.kind is EntryKind.WORKOUT
    assert entry.name == "Run 3km"
    assert entry.calories == 250
    assert entry.protein is None
    assert entry.fat is None
    assert entry.carbs is None
    assert entry.to_wire() == {"type": "workout", "name": "Run 3km", "calories": 250}


def test_non_numeric_values_become_zero() -> None:
    entry = normalize_entry(
        {
            "type": "meal",
            "name": "mystery stew",
            "calories": "lots",
            "protein": None,
            "fat": "n/a",
            "carbs": "12.5",
        }
    )

    assert entry.calories == 0
    assert entry.protein == 0
    assert entry.fat == 0
    assert entry.carbs == 12.5


def test_kind_is_case_insensitive_and_accepts_kind_key() -> None:
    meal = normalize_entry({"type": " Meal ", "name": "x", "calories": 1})
    workout = normalize_entry({"kind": "workout", "name": "x", "calories": 1})

    assert meal.kind is EntryKind.MEAL
    assert workout.kind is EntryKind.WORKOUT


def test_calorie_and_macro_aliases() -> None:
    entry = normalize_entry(
        {"type": "meal", "name": "oats", "kcal": 150, "carbohydrates": 27}
    )

    assert entry.calories == 150
    assert entry.carbs == 27
    assert entry.protein is None


@pytest.mark.parametrize(
    "source",
    [
        ["not", "an", "object"],
        {"name": "rice", "calories": 100},
        {"type": "snack", "name": "rice", "calories": 100},
        {"type": "meal", "calories": 100},
        {"type": "meal", "name": "   ", "calories": 100},
        {"type": "meal", "name": 42, "calories": 100},
        {"type": "meal", "name": "rice"},
    ],
)
def test_schema_violations(source: object) -> None:
    with pytest.raises(ResolutionError) as excinfo:
        normalize_entry(source)

    assert excinfo.value.kind is ResolutionErrorKind.SCHEMA_VIOLATION


def test_normalization_is_idempotent() -> None:
    sources = [
        {"type": "meal", "name": "rice", "calories": 180, "protein": 4, "fat": 0},
        {"type": "workout", "name": "Run 3km", "calories": "250"},
    ]
    for source in sources:
        first = normalize_entry(source)
        second = normalize_entry(first.to_wire())
        assert second == first


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (3, 3.0),
        (2.5, 2.5),
        (" 7 ", 7.0),
        ("1e2", 100.0),
        (True, 0.0),
        ("nan", 0.0),
        (float("inf"), 0.0),
        ([1], 0.0),
        (10**400, 0.0),
        (None, 0.0),
    ],
)
def test_coerce_number(value: object, expected: float) -> None:
    assert coerce_number(value) == expected


def test_oversized_integer_calories_become_zero() -> None:
    entry = normalize_entry({"type": "meal", "name": "x", "calories": 10**400})

    assert entry.calories == 0
