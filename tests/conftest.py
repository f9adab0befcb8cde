from __future__ import annotations

from datetime import date

import pytest

from models import DistributionOptions, Routine, StudyPlan

MON_WED_FRI = (False, True, False, True, False, True, False)


@pytest.fixture()
def make_plan():
    def _make_plan(**overrides) -> StudyPlan:
        fields = dict(
            plan_id=1,
            title="Math plan",
            subject="Math",
            plan_type="textbook",
            total_amount=100,
            completed_amount=0,
            start_date=date(2024, 1, 1),
            end_date=date(2024, 1, 10),
            is_active=True,
            priority=1,
            material="Textbook A",
        )
        fields.update(overrides)
        return StudyPlan(**fields)

    return _make_plan


@pytest.fixture()
def make_routine():
    def _make_routine(**overrides) -> Routine:
        fields = dict(
            subject="Math",
            category="study",
            start_time="19:00",
            end_time="20:00",
            days=MON_WED_FRI,
        )
        fields.update(overrides)
        return Routine(**fields)

    return _make_routine


@pytest.fixture()
def first_week():
    # 2024-01-01 is a Monday
    return DistributionOptions(start_date=date(2024, 1, 1), end_date=date(2024, 1, 7), member_id=42)
