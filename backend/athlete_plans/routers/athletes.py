from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from ..dependencies import get_dataset_store, read_json_body, require_admin
from ..repositories.json_store import JsonDatasetStore
from ..schemas.athlete import AthleteRead
from ..schemas.auth import Acknowledgement
from ..services import athletes as athlete_service
from ..services.athletes import AthleteNotFoundError, AthleteValidationError
from ..services.sessions import AdminSession

router = APIRouter(prefix="/api/athletes", tags=["athletes"])

ATHLETE_NOT_FOUND = "Athlete not found"


@router.get("", response_model=list[AthleteRead])
async def list_athletes(
    _: AdminSession = Depends(require_admin),
    store: JsonDatasetStore = Depends(get_dataset_store),
) -> list[AthleteRead]:
    return [AthleteRead.model_validate(athlete) for athlete in athlete_service.list_athletes(store)]


@router.post("", response_model=AthleteRead)
async def create_athlete(
    _: AdminSession = Depends(require_admin),
    body: dict[str, Any] = Depends(read_json_body),
    store: JsonDatasetStore = Depends(get_dataset_store),
) -> AthleteRead:
    try:
        athlete = athlete_service.create_athlete(store, body)
    except AthleteValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)
    return AthleteRead.model_validate(athlete)


# Deliberately public: a single plan can be shared by link without logging in.
@router.get("/{athlete_id}", response_model=AthleteRead)
async def get_athlete(
    athlete_id: str,
    store: JsonDatasetStore = Depends(get_dataset_store),
) -> AthleteRead:
    try:
        athlete = athlete_service.get_athlete(store, athlete_id)
    except AthleteNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ATHLETE_NOT_FOUND)
    return AthleteRead.model_validate(athlete)


@router.put("/{athlete_id}", response_model=AthleteRead)
async def update_athlete(
    athlete_id: str,
    _: AdminSession = Depends(require_admin),
    body: dict[str, Any] = Depends(read_json_body),
    store: JsonDatasetStore = Depends(get_dataset_store),
) -> AthleteRead:
    try:
        athlete = athlete_service.update_athlete(store, athlete_id, body)
    except AthleteNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ATHLETE_NOT_FOUND)
    except AthleteValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)
    return AthleteRead.model_validate(athlete)


@router.delete("/{athlete_id}", response_model=Acknowledgement)
async def delete_athlete(
    athlete_id: str,
    _: AdminSession = Depends(require_admin),
    store: JsonDatasetStore = Depends(get_dataset_store),
) -> Acknowledgement:
    try:
        athlete_service.delete_athlete(store, athlete_id)
    except AthleteNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ATHLETE_NOT_FOUND)
    return Acknowledgement()
