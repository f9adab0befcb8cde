from __future__ import annotations

import logging
import math
from datetime import date
from typing import Dict, List, Optional, Sequence, Tuple

from availability import active_weekday_count, extract_subject_weekly_time
from models import (
    DistributionOptions,
    DistributionResult,
    GeneratedMission,
    Routine,
    StudyPlan,
    SubjectWeeklyTime,
)
from preprocess import build_valid_dates, filter_plan_dates, intersect_plan_window, select_active_plans
from time_utils import day_index

logger = logging.getLogger(__name__)


def calculate_daily_target(
    plan: StudyPlan,
    subject_time: Optional[SubjectWeeklyTime],
    remaining_days: int,
) -> int:
    """Per-day quantity needed to finish the plan within remaining_days.

    When the subject has routines, the horizon is shrunk to the share of days that
    actually host study time for it, which pushes the daily quota up. This is an
    approximation; the last-day catch-up in allocate_plan settles the remainder.
    """
    remaining_amount = plan.remaining_amount
    if remaining_days <= 0 or remaining_amount <= 0:
        return 0

    if subject_time is not None:
        active_days = active_weekday_count(subject_time)
        if active_days > 0:
            adjusted_days = max(remaining_days * active_days // 7, 1)
            return math.ceil(remaining_amount / adjusted_days)

    return math.ceil(remaining_amount / remaining_days)


def allocate_plan(
    plan: StudyPlan,
    plan_dates: Sequence[date],
    subject_time: Optional[SubjectWeeklyTime],
    daily_target: int,
    member_id: int,
) -> Tuple[List[GeneratedMission], int]:
    """Walk plan_dates in order and emit one mission per date that takes a share.

    Returns the missions and the routine minutes they were matched to.
    """
    remaining_amount = plan.remaining_amount
    missions: List[GeneratedMission] = []
    study_minutes = 0
    distributed = 0
    last_index = len(plan_dates) - 1

    for index, current in enumerate(plan_dates):
        day_slot = subject_time.slot_for(day_index(current)) if subject_time is not None else None
        if subject_time is not None and day_slot is None:
            continue

        remaining_to_distribute = remaining_amount - distributed
        today_target = min(daily_target, remaining_to_distribute)
        if index == last_index:
            today_target = remaining_to_distribute
        if today_target <= 0:
            continue

        start_amount = plan.completed_amount + distributed + 1
        end_amount = plan.completed_amount + distributed + today_target
        missions.append(
            GeneratedMission(
                member_id=member_id,
                date=current,
                plan_id=plan.plan_id,
                subject=plan.subject,
                title=f"{plan.material_label} {plan.unit_symbol}.{start_amount}~{end_amount}",
                description=plan.title,
                target_amount=today_target,
                start_time=day_slot.start_time if day_slot else None,
                end_time=day_slot.end_time if day_slot else None,
            )
        )
        distributed += today_target
        if day_slot is not None:
            study_minutes += day_slot.minutes

    return missions, study_minutes


def distribute_plans_to_missions(
    plans: Sequence[StudyPlan],
    routines: Sequence[Routine],
    options: DistributionOptions,
) -> DistributionResult:
    result = DistributionResult()
    if options.start_date > options.end_date:
        logger.debug("Distribution window %s..%s is inverted; nothing to do", options.start_date, options.end_date)
        return result

    subject_time_map: Dict[str, SubjectWeeklyTime] = {
        s.subject: s for s in extract_subject_weekly_time(routines)
    }
    active_plans = select_active_plans(plans, options.prioritize_high_priority)
    valid_dates = build_valid_dates(options)
    summary = result.summary

    for plan in active_plans:
        subject_time = subject_time_map.get(plan.subject)
        if subject_time is None:
            result.warnings.append(f"{plan.subject} 과목의 학습 루틴이 설정되지 않았습니다.")

        window = intersect_plan_window(plan, options)
        if window is None:
            logger.debug("Plan %s lies outside the distribution window", plan.plan_id)
            continue

        plan_dates = filter_plan_dates(valid_dates, *window)
        remaining_amount = plan.remaining_amount
        if remaining_amount <= 0 or not plan_dates:
            logger.debug("Plan %s has nothing to distribute (remaining=%s, dates=%d)", plan.plan_id, remaining_amount, len(plan_dates))
            continue

        daily_target = calculate_daily_target(plan, subject_time, len(plan_dates))
        missions, study_minutes = allocate_plan(plan, plan_dates, subject_time, daily_target, options.member_id)

        result.missions.extend(missions)
        summary.total_missions += len(missions)
        if missions:
            summary.by_subject[plan.subject] = summary.by_subject.get(plan.subject, 0) + len(missions)
        summary.total_study_minutes += study_minutes

        distributed = sum(m.target_amount for m in missions)
        if distributed < remaining_amount:
            result.warnings.append(
                f"{plan.title}: {remaining_amount - distributed}{plan.unit_label}가 미분배되었습니다."
            )

    logger.debug("Generated %d missions with %d warnings", summary.total_missions, len(result.warnings))
    return result
