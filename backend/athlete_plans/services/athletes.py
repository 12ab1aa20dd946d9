"""
Athlete use cases on top of the JSON dataset.

Every operation loads the full dataset from disk and, when it mutates it,
writes the full dataset back before returning. Nothing serializes concurrent
callers: two interleaved load/mutate/save cycles can lose one of the updates.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from ..repositories.json_store import JsonDatasetStore
from ..schemas.athlete import AthleteCreate, AthleteRecord, AthleteUpdate, Dataset

logger = logging.getLogger(__name__)


class AthleteError(Exception):
    """Base class for athlete-related exceptions."""


class AthleteNotFoundError(AthleteError):
    def __init__(self, athlete_id: str):
        super().__init__(f"Athlete {athlete_id} not found")
        self.athlete_id = athlete_id


class AthleteValidationError(AthleteError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def list_athletes(store: JsonDatasetStore) -> list[AthleteRecord]:
    return list(store.load().athletes)


def create_athlete(store: JsonDatasetStore, data: dict[str, Any]) -> AthleteRecord:
    try:
        payload = AthleteCreate.model_validate(data)
    except ValidationError as exc:
        raise AthleteValidationError("Name is required") from exc

    dataset = store.load()
    athlete = AthleteRecord(
        id=dataset.next_id,
        name=payload.name,
        plan=payload.plan if payload.plan is not None else {},
    )
    dataset.next_id += 1
    dataset.athletes.append(athlete)
    store.save(dataset)
    logger.info("Created athlete %s", athlete.id)
    return athlete


def get_athlete(store: JsonDatasetStore, athlete_id: str) -> AthleteRecord:
    dataset = store.load()
    return dataset.athletes[_find_index(dataset, athlete_id)]


def update_athlete(store: JsonDatasetStore, athlete_id: str, data: dict[str, Any]) -> AthleteRecord:
    """Merge ``name`` and/or ``plan`` from ``data`` into an existing athlete.

    Fields missing from ``data`` keep their stored value and the id never
    changes. ``plan`` is stored verbatim, including an explicit ``null``.
    """
    dataset = store.load()
    index = _find_index(dataset, athlete_id)

    try:
        payload = AthleteUpdate.model_validate(data)
    except ValidationError as exc:
        raise AthleteValidationError("Name must be a non-empty string") from exc
    changes = payload.model_dump(exclude_unset=True)
    if "name" in changes and changes["name"] is None:
        raise AthleteValidationError("Name must be a non-empty string")

    athlete = dataset.athletes[index]
    for field, value in changes.items():
        setattr(athlete, field, value)
    store.save(dataset)
    logger.info("Updated athlete %s (%s)", athlete.id, ", ".join(sorted(changes)) or "no fields")
    return athlete


def delete_athlete(store: JsonDatasetStore, athlete_id: str) -> AthleteRecord:
    dataset = store.load()
    removed = dataset.athletes.pop(_find_index(dataset, athlete_id))
    store.save(dataset)
    logger.info("Deleted athlete %s", removed.id)
    return removed


def _find_index(dataset: Dataset, athlete_id: str) -> int:
    # Ids are opaque to clients, so compare on the string form.
    for index, athlete in enumerate(dataset.athletes):
        if str(athlete.id) == athlete_id:
            return index
    raise AthleteNotFoundError(athlete_id)
