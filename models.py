from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Tuple

from time_utils import time_to_minutes

PLAN_TYPE_TEXTBOOK = "textbook"
PLAN_TYPE_LECTURE = "lecture"

CATEGORY_STUDY = "study"

MISSION_STATUS_PENDING = "pending"


@dataclass(frozen=True)
class StudyPlan:
    plan_id: int
    title: str
    subject: str
    plan_type: str
    total_amount: int
    completed_amount: int
    start_date: date
    end_date: date
    is_active: bool = True
    priority: int = 0
    material: Optional[str] = None

    @property
    def remaining_amount(self) -> int:
        return self.total_amount - self.completed_amount

    @property
    def is_textbook(self) -> bool:
        return self.plan_type == PLAN_TYPE_TEXTBOOK

    @property
    def unit_symbol(self) -> str:
        return "p" if self.is_textbook else "강"

    @property
    def unit_label(self) -> str:
        return "페이지" if self.is_textbook else "강"

    @property
    def material_label(self) -> str:
        return self.material or self.title


@dataclass(frozen=True)
class Routine:
    category: str
    start_time: str
    end_time: str
    days: Tuple[bool, ...]  # [Sun, Mon, Tue, Wed, Thu, Fri, Sat]
    subject: Optional[str] = None
    title: str = ""

    @property
    def duration_minutes(self) -> int:
        return time_to_minutes(self.end_time) - time_to_minutes(self.start_time)

    @property
    def is_study(self) -> bool:
        return self.category == CATEGORY_STUDY and bool(self.subject)


@dataclass(frozen=True)
class TimeSlot:
    day_index: int
    start_time: str
    end_time: str
    minutes: int


@dataclass
class SubjectWeeklyTime:
    subject: str
    total_minutes: int = 0
    daily_minutes: List[int] = field(default_factory=lambda: [0] * 7)
    slots: List[TimeSlot] = field(default_factory=list)

    def slot_for(self, weekday: int) -> Optional[TimeSlot]:
        return next((s for s in self.slots if s.day_index == weekday), None)


@dataclass(frozen=True)
class DistributionOptions:
    start_date: date
    end_date: date
    member_id: int
    prioritize_high_priority: bool = False
    skip_weekends: bool = False


@dataclass(frozen=True)
class GeneratedMission:
    member_id: int
    date: date
    plan_id: int
    subject: str
    title: str
    description: str
    target_amount: int
    completed_amount: int = 0
    achievement: int = 0
    status: str = MISSION_STATUS_PENDING
    start_time: Optional[str] = None
    end_time: Optional[str] = None


@dataclass
class DistributionSummary:
    total_missions: int = 0
    by_subject: Dict[str, int] = field(default_factory=dict)
    total_study_minutes: int = 0


@dataclass
class DistributionResult:
    missions: List[GeneratedMission] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    summary: DistributionSummary = field(default_factory=DistributionSummary)


@dataclass(frozen=True)
class WeeklySubjectSummary:
    subject: str
    total_target: int
    weekly_missions: int
    average_daily: int


@dataclass(frozen=True)
class WeeklySummary:
    week_start: date
    week_end: date
    subjects: List[WeeklySubjectSummary]


@dataclass(frozen=True)
class AvailableStudyTime:
    total_weekly_minutes: int
    by_subject: Dict[str, int]
    by_day: List[int]
    free_time_by_day: List[int]
