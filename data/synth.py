"""Synthetic expense and category generator for the budget dashboard.

Produces a small personal ledger shaped like the dashboard's remote store:
one CSV of categorised expenses and one CSV of per-category monthly budgets.
The generator deliberately covers the awkward cases the dashboard has to
handle: a category with no budget, a category with no spend this month,
uncategorised expenses and a category that runs over budget.
"""

from __future__ import annotations

import calendar
import itertools
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, TypeVar

import numpy as np
import pandas as pd

T = TypeVar("T")


EXPENSE_FIELDS: Tuple[str, ...] = (
    "id",
    "amount",
    "description",
    "merchant",
    "expense_date",
    "category_id",
    "category_name",
    "category_color",
)

CATEGORY_FIELDS: Tuple[str, ...] = ("id", "name", "color", "monthly_budget", "icon")


@dataclass(frozen=True)
class CategoryProfile:
    """A budget category and how often it sees spend."""

    id: str
    name: str
    color: str
    monthly_budget: float
    icon: str
    merchants: Tuple[str, ...]
    amount_bounds: Tuple[float, float]
    monthly_events: Tuple[int, int]


CATEGORY_PROFILES: Sequence[CategoryProfile] = (
    CategoryProfile(
        id="cat-groceries",
        name="Groceries",
        color="#22C55E",
        monthly_budget=450.0,
        icon="shopping-cart",
        merchants=("Whole Foods", "Trader Joe's", "Costco"),
        amount_bounds=(18.0, 95.0),
        monthly_events=(5, 9),
    ),
    CategoryProfile(
        id="cat-dining",
        name="Dining Out",
        color="#F97316",
        monthly_budget=180.0,
        icon="utensils",
        merchants=("Chipotle", "Sweetgreen", "Blue Bottle Coffee", "Local Pizzeria"),
        amount_bounds=(12.0, 70.0),
        monthly_events=(6, 10),
    ),
    CategoryProfile(
        id="cat-transport",
        name="Transport",
        color="#2563EB",
        monthly_budget=160.0,
        icon="car",
        merchants=("Shell", "Uber", "Metro Transit"),
        amount_bounds=(8.0, 55.0),
        monthly_events=(3, 6),
    ),
    CategoryProfile(
        id="cat-utilities",
        name="Utilities",
        color="#9333EA",
        monthly_budget=220.0,
        icon="zap",
        merchants=("City Power & Light", "Comcast"),
        amount_bounds=(60.0, 110.0),
        monthly_events=(2, 2),
    ),
    CategoryProfile(
        id="cat-entertainment",
        name="Entertainment",
        color="#FACC15",
        monthly_budget=0.0,
        icon="film",
        merchants=("AMC Theatres", "Steam", "Spotify"),
        amount_bounds=(9.0, 45.0),
        monthly_events=(1, 3),
    ),
    CategoryProfile(
        id="cat-travel",
        name="Travel",
        color="#0EA5E9",
        monthly_budget=300.0,
        icon="plane",
        merchants=(),
        amount_bounds=(0.0, 0.0),
        monthly_events=(0, 0),
    ),
)

UNCATEGORISED_MERCHANTS: Sequence[str] = ("Corner Store", "Venmo", "Post Office")


def generate_synthetic_dataset(
    seed: Optional[int] = None,
    today: date | datetime | str | None = None,
    months: int = 2,
    uncategorised_count: int = 2,
) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """Return ``(expenses_df, categories_df)`` covering ``months`` months up to ``today``.

    Spend in the current month is capped at ``today``. Dining is pushed past
    its budget in the current month so the dashboard always has an over-budget
    row to show.
    """

    if months < 1:
        raise ValueError("months must be at least 1")

    rng = np.random.default_rng(seed)
    anchor = _normalize_date(today) if today is not None else date.today()
    counter = itertools.count(1)
    records: List[dict] = []

    for offset in range(months - 1, -1, -1):
        month_start = _add_months(_month_floor(anchor), -offset)
        last_day = anchor.day if offset == 0 else calendar.monthrange(month_start.year, month_start.month)[1]

        for profile in CATEGORY_PROFILES:
            low, high = profile.monthly_events
            if high <= 0 or not profile.merchants:
                continue
            events = int(rng.integers(low, high + 1))
            for _ in range(events):
                day = int(rng.integers(1, last_day + 1))
                when = _clamp_day(month_start.year, month_start.month, day)
                amount = round(float(rng.uniform(*profile.amount_bounds)), 2)
                merchant = _rng_choice(profile.merchants, rng)
                records.append(_expense_record(next(counter), when, amount, merchant, profile))

        for _ in range(uncategorised_count):
            day = int(rng.integers(1, last_day + 1))
            when = _clamp_day(month_start.year, month_start.month, day)
            amount = round(float(rng.uniform(5.0, 40.0)), 2)
            merchant = _rng_choice(UNCATEGORISED_MERCHANTS, rng)
            records.append(_expense_record(next(counter), when, amount, merchant, None))

    dining = next(profile for profile in CATEGORY_PROFILES if profile.id == "cat-dining")
    records.append(
        _expense_record(next(counter), anchor, round(dining.monthly_budget * 1.1, 2), "Anniversary Dinner", dining)
    )

    expenses_df = pd.DataFrame.from_records(records, columns=EXPENSE_FIELDS)
    expenses_df.sort_values("expense_date", ascending=False, inplace=True, kind="stable")
    expenses_df.reset_index(drop=True, inplace=True)

    categories_df = pd.DataFrame.from_records(
        [
            {
                "id": profile.id,
                "name": profile.name,
                "color": profile.color,
                "monthly_budget": profile.monthly_budget,
                "icon": profile.icon,
            }
            for profile in CATEGORY_PROFILES
        ],
        columns=CATEGORY_FIELDS,
    )
    return expenses_df, categories_df


def write_seed_files(
    directory: str | Path,
    *,
    seed: Optional[int] = None,
    expenses_file: str = "expenses.csv",
    categories_file: str = "categories.csv",
    **kwargs,
) -> Tuple[Path, Path]:
    """Generate synthetic data and persist both CSVs under ``directory``.

    Additional keyword arguments are forwarded to
    :func:`generate_synthetic_dataset`.
    """

    target = Path(directory)
    target.mkdir(parents=True, exist_ok=True)
    expenses_df, categories_df = generate_synthetic_dataset(seed=seed, **kwargs)

    expenses_path = target / expenses_file
    categories_path = target / categories_file
    expenses_df.to_csv(expenses_path, index=False)
    categories_df.to_csv(categories_path, index=False)
    return expenses_path, categories_path


def _expense_record(
    number: int,
    when: date,
    amount: float,
    merchant: str,
    profile: Optional[CategoryProfile],
) -> dict:
    return {
        "id": f"exp-{number:04d}",
        "amount": amount,
        "description": "" if number % 4 == 0 else f"{merchant} purchase",
        "merchant": merchant,
        "expense_date": when.isoformat(),
        "category_id": profile.id if profile else None,
        "category_name": profile.name if profile else None,
        "category_color": profile.color if profile else None,
    }


def _normalize_date(value: date | datetime | str) -> date:
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str):
        parsed = datetime.fromisoformat(value)
        return parsed.date()
    raise TypeError(f"Unsupported date value: {value!r}")


def _add_months(anchor: date, months: int) -> date:
    month = anchor.month - 1 + months
    year = anchor.year + month // 12
    month = month % 12 + 1
    day = min(anchor.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def _month_floor(moment: date) -> date:
    return moment.replace(day=1)


def _clamp_day(year: int, month: int, day: int) -> date:
    _, max_day = calendar.monthrange(year, month)
    return date(year, month, max(1, min(day, max_day)))


def _rng_choice(options: Sequence[T], rng: np.random.Generator) -> T:
    if not options:
        raise ValueError("Cannot choose from an empty sequence")
    idx = int(rng.integers(0, len(options)))
    return options[idx]


if __name__ == "__main__":
    paths = write_seed_files(Path(__file__).resolve().parent, seed=7)
    print("Wrote", ", ".join(str(path) for path in paths))
