"""
JSON file persistence for the athlete dataset.

The whole dataset lives in a single document that is read in full on every
``load`` and rewritten in full on every ``save``. Writes go straight to the
target file, so a crash in the middle of ``save`` can leave it truncated.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from ..schemas.athlete import Dataset

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Base class for persistence failures."""


class DatasetCorruptError(StorageError):
    def __init__(self, path: Path, reason: str):
        super().__init__(f"Could not parse {path}: {reason}")
        self.path = path
        self.reason = reason


class JsonDatasetStore:
    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load(self) -> Dataset:
        if not self.path.exists():
            dataset = Dataset()
            self.save(dataset)
            logger.info("Initialized empty dataset at %s", self.path)
            return dataset

        raw = self.path.read_text(encoding="utf-8")
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise DatasetCorruptError(self.path, str(exc)) from exc
        if not isinstance(payload, dict):
            raise DatasetCorruptError(self.path, "top-level value must be an object")
        try:
            dataset = Dataset.model_validate(payload)
        except ValidationError as exc:
            raise DatasetCorruptError(self.path, str(exc)) from exc

        # Hand-edited files may carry a counter that would reissue an existing id.
        highest = max((athlete.id for athlete in dataset.athletes), default=0)
        if dataset.next_id <= highest:
            logger.warning(
                "nextId %s in %s is not above highest id %s; raising it",
                dataset.next_id,
                self.path,
                highest,
            )
            dataset.next_id = highest + 1
        return dataset

    def save(self, dataset: Dataset) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = dataset.model_dump(mode="json", by_alias=True)
        self.path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
