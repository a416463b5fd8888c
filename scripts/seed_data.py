"""
Deterministic sample-data generator.

Produces 120 product transactions for offline development:
  - 6 categories, prices from 5 to 1 200 (a few land in the bucket gaps)
  - sale dates spread over every month of 2021 and 2022
  - ~55 % sold
"""

import random
from datetime import date, timedelta
from decimal import Decimal

from app.models import Transaction
from app.store import DataStore

SEED = 42
TOTAL = 120
START = date(2021, 1, 1)
END   = date(2022, 12, 31)

_CATALOGUE = {
    "men's clothing": ["Slim Fit T-Shirt", "Cotton Jacket", "Casual Shirt"],
    "women's clothing": ["Rain Jacket", "Short Sleeve Top", "Moisture Wicking Tee"],
    "jewelery": ["Silver Dragon Bracelet", "Gold Petite Micropave", "Princess Ring"],
    "electronics": ["External Hard Drive", "Portable SSD", "Gaming Monitor"],
    "books": ["Python Cookbook", "Data Pipelines Pocket Reference"],
    "toys": ["Wooden Train Set", "Puzzle Cube"],
}

_PRICE_RANGES = {
    "men's clothing": (5, 120),
    "women's clothing": (7, 80),
    "jewelery": (9, 1_200),
    "electronics": (60, 1_100),
    "books": (10, 60),
    "toys": (5, 250),
}


def generate_transactions(total: int = TOTAL, seed: int = SEED) -> list[Transaction]:
    rng = random.Random(seed)
    span = (END - START).days
    categories = list(_CATALOGUE)

    records = []
    for n in range(1, total + 1):
        category = rng.choice(categories)
        title = rng.choice(_CATALOGUE[category])
        lo, hi = _PRICE_RANGES[category]
        price = Decimal(str(round(rng.uniform(lo, hi), 2)))
        sold_on = START + timedelta(days=rng.randint(0, span))
        records.append(Transaction(
            id=n,
            title=title,
            description=f"{title} ({category})",
            price=price,
            category=category,
            sold=rng.random() < 0.55,
            date_of_sale=sold_on.isoformat(),
        ))
    return records


def seed(store: DataStore) -> int:
    return store.replace_all(generate_transactions())
