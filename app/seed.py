"""
Remote seed loader.

Fetches the product transaction feed (a JSON array) and replaces the whole
collection with it. Records are validated before the store is touched, so
a failed seed leaves the previous data in place.
"""

import logging

import httpx
from pydantic import ValidationError

from app.models import Transaction
from app.store import DataStore

logger = logging.getLogger(__name__)


class SeedError(Exception):
    """The seed document could not be fetched or understood."""


def fetch_seed_records(client: httpx.Client, url: str) -> list[Transaction]:
    logger.info("Fetching seed data from %s", url)
    try:
        response = client.get(url)
        response.raise_for_status()
        payload = response.json()
    except httpx.HTTPError as exc:
        raise SeedError(f"Failed to fetch seed data: {exc}") from exc
    except ValueError as exc:
        raise SeedError("Seed response is not valid JSON") from exc

    if not isinstance(payload, list):
        raise SeedError(f"Seed document must be a JSON array, got {type(payload).__name__}")

    try:
        return [Transaction.model_validate(item) for item in payload]
    except ValidationError as exc:
        raise SeedError(f"Invalid record in seed data: {exc}") from exc


def seed_from_url(store: DataStore, client: httpx.Client, url: str) -> int:
    records = fetch_seed_records(client, url)
    loaded = store.replace_all(records)
    logger.info("Seeded %d transactions", loaded)
    return loaded
