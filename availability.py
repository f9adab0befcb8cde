from __future__ import annotations

from typing import Dict, List, Sequence

from models import AvailableStudyTime, Routine, SubjectWeeklyTime, TimeSlot

# 06:00-24:00
ACTIVE_DAY_MINUTES = 18 * 60


def extract_subject_weekly_time(routines: Sequence[Routine]) -> List[SubjectWeeklyTime]:
    subject_map: Dict[str, SubjectWeeklyTime] = {}
    for routine in routines:
        if not routine.is_study:
            continue
        active_weekdays = [weekday for weekday, active in enumerate(routine.days) if active]
        if not active_weekdays:
            continue
        duration = routine.duration_minutes
        subject_time = subject_map.setdefault(routine.subject, SubjectWeeklyTime(subject=routine.subject))
        for weekday in active_weekdays:
            subject_time.total_minutes += duration
            subject_time.daily_minutes[weekday] += duration
            subject_time.slots.append(
                TimeSlot(
                    day_index=weekday,
                    start_time=routine.start_time,
                    end_time=routine.end_time,
                    minutes=duration,
                )
            )
    return list(subject_map.values())


def active_weekday_count(subject_time: SubjectWeeklyTime) -> int:
    return sum(1 for minutes in subject_time.daily_minutes if minutes > 0)


def calculate_available_study_time(routines: Sequence[Routine]) -> AvailableStudyTime:
    """Weekly study minutes per subject and weekday, plus free time left per weekday.

    Every routine occupies time regardless of category; only study routines with
    a subject count towards study minutes.
    """
    by_subject: Dict[str, int] = {}
    by_day = [0] * 7
    occupied_by_day = [0] * 7

    for routine in routines:
        duration = routine.duration_minutes
        for weekday, active in enumerate(routine.days):
            if not active:
                continue
            occupied_by_day[weekday] += duration
            if routine.is_study:
                by_subject[routine.subject] = by_subject.get(routine.subject, 0) + duration
                by_day[weekday] += duration

    free_time_by_day = [max(0, ACTIVE_DAY_MINUTES - occupied) for occupied in occupied_by_day]
    return AvailableStudyTime(
        total_weekly_minutes=sum(by_subject.values()),
        by_subject=by_subject,
        by_day=by_day,
        free_time_by_day=free_time_by_day,
    )
