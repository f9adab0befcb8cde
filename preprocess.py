from __future__ import annotations

from datetime import date
from typing import List, Optional, Sequence, Tuple

from models import DistributionOptions, StudyPlan
from time_utils import date_range, is_weekend


def select_active_plans(plans: Sequence[StudyPlan], prioritize_high_priority: bool = False) -> List[StudyPlan]:
    active = [p for p in plans if p.is_active]
    if prioritize_high_priority:
        # sorted() is stable, equal priorities keep their input order
        active = sorted(active, key=lambda p: p.priority)
    return active


def build_valid_dates(options: DistributionOptions) -> List[date]:
    dates = date_range(options.start_date, options.end_date)
    if options.skip_weekends:
        dates = [d for d in dates if not is_weekend(d)]
    return dates


def intersect_plan_window(plan: StudyPlan, options: DistributionOptions) -> Optional[Tuple[date, date]]:
    plan_start = max(plan.start_date, options.start_date)
    plan_end = min(plan.end_date, options.end_date)
    if plan_start > plan_end:
        return None
    return plan_start, plan_end


def filter_plan_dates(valid_dates: Sequence[date], plan_start: date, plan_end: date) -> List[date]:
    return [d for d in valid_dates if plan_start <= d <= plan_end]
