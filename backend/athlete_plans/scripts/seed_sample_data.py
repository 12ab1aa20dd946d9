from __future__ import annotations

from athlete_plans.core.config import get_settings
from athlete_plans.repositories.json_store import JsonDatasetStore
from athlete_plans.schemas.athlete import AthleteRecord
from athlete_plans.services import athletes as athlete_service

DEMO_ATHLETE_NAME = "Athlete Demo"

DEMO_PLAN = {
    "goal": "10K",
    "weeks": [
        {
            "week": 1,
            "sessions": [
                {"day": "Mon", "type": "easy", "title": "Easy 30", "duration_min": 30},
                {"day": "Wed", "type": "intervals", "title": "8x400", "distance_km": 10},
                {"day": "Fri", "type": "strength", "title": "Circuit", "duration_min": 45},
                {"day": "Sun", "type": "long", "title": "Long run", "distance_km": 14},
            ],
        }
    ],
}


def ensure_demo_athlete(store: JsonDatasetStore) -> AthleteRecord:
    for athlete in athlete_service.list_athletes(store):
        if athlete.name == DEMO_ATHLETE_NAME:
            return athlete
    return athlete_service.create_athlete(store, {"name": DEMO_ATHLETE_NAME, "plan": DEMO_PLAN})


def main() -> None:
    settings = get_settings()
    store = JsonDatasetStore(settings.data_file)
    athlete = ensure_demo_athlete(store)
    print(f"Seed data ready in {store.path}. Athlete #{athlete.id}: {athlete.name}")


if __name__ == "__main__":
    main()
