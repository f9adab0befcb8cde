from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List

from pydantic import ValidationError

from models import Routine, StudyPlan
from models_pydantic import RoutinePydantic, StudyPlanPydantic

logger = logging.getLogger(__name__)


def _read_items(path: Path, key: str) -> List[Any]:
    with path.open("r", encoding="utf-8") as f:
        payload = json.load(f)

    if isinstance(payload, dict) and isinstance(payload.get(key), list):
        return payload[key]
    if isinstance(payload, list):
        return payload
    raise ValueError(f"{path}: expected a list or an object with a '{key}' list")


def _parse_plan(data: dict) -> StudyPlan:
    return StudyPlanPydantic.model_validate(data).to_model()


def _parse_routine(data: dict) -> Routine:
    return RoutinePydantic.model_validate(data).to_model()


def load_plans_from_json(path: Path) -> List[StudyPlan]:
    try:
        plans = [_parse_plan(item) for item in _read_items(path, "plans")]
    except ValidationError as exc:
        raise ValueError(f"Invalid plan in {path}: {exc}") from exc

    logger.info("Loaded %d plans from %s", len(plans), path)
    return plans


def load_routines_from_json(path: Path) -> List[Routine]:
    try:
        routines = [_parse_routine(item) for item in _read_items(path, "routines")]
    except ValidationError as exc:
        raise ValueError(f"Invalid routine in {path}: {exc}") from exc

    logger.info("Loaded %d routines from %s", len(routines), path)
    return routines
