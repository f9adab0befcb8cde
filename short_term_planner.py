from __future__ import annotations

from datetime import date
from typing import List, Sequence

from models import DistributionOptions, GeneratedMission, Routine, StudyPlan
from planner_core import distribute_plans_to_missions


def generate_daily_missions(
    target_date: date,
    plans: Sequence[StudyPlan],
    routines: Sequence[Routine],
    member_id: int,
) -> List[GeneratedMission]:
    options = DistributionOptions(start_date=target_date, end_date=target_date, member_id=member_id)
    return distribute_plans_to_missions(plans, routines, options).missions
