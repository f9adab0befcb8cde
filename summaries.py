from __future__ import annotations

import math
from datetime import date, timedelta
from typing import List, Sequence

from availability import active_weekday_count, calculate_available_study_time, extract_subject_weekly_time
from models import Routine, StudyPlan, WeeklySubjectSummary, WeeklySummary
from planner_core import calculate_daily_target

__all__ = ["calculate_available_study_time", "generate_weekly_summary"]

WEEK_DAYS = 7


def generate_weekly_summary(
    week_start: date,
    plans: Sequence[StudyPlan],
    routines: Sequence[Routine],
) -> WeeklySummary:
    """Project how much of each subject's active plans one week of routines should cover.

    Only subjects with study routines appear. Each plan contributes its daily
    target over a seven day horizon times the number of study weekdays.
    """
    active_plans = [p for p in plans if p.is_active]
    rows: List[WeeklySubjectSummary] = []

    for subject_time in extract_subject_weekly_time(routines):
        active_days = active_weekday_count(subject_time)
        total_target = 0
        for plan in active_plans:
            if plan.subject != subject_time.subject:
                continue
            total_target += calculate_daily_target(plan, subject_time, WEEK_DAYS) * active_days

        average_daily = math.floor(total_target / active_days + 0.5) if active_days > 0 else 0
        rows.append(
            WeeklySubjectSummary(
                subject=subject_time.subject,
                total_target=total_target,
                weekly_missions=active_days,
                average_daily=average_daily,
            )
        )

    return WeeklySummary(
        week_start=week_start,
        week_end=week_start + timedelta(days=WEEK_DAYS - 1),
        subjects=rows,
    )
