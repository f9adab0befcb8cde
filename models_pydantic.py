"""Pydantic models validating raw plan, routine and option payloads."""

import re
from datetime import date
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from models import DistributionOptions, Routine, StudyPlan

TIME_PATTERN = re.compile(r"^(?:[01]\d|2[0-3]):[0-5]\d$|^24:00$")


class StudyPlanPydantic(BaseModel):
    """Long-term study plan: a quantity of pages or lectures to finish within a date window."""

    plan_id: int = Field(..., alias="id", description="Identifier of the plan")
    title: str = Field(..., description="Display title of the plan")
    subject: str = Field(..., description="Subject tag matched against routines (e.g., '수학')")
    plan_type: Literal["textbook", "lecture"] = Field(
        ..., alias="type", description="'textbook' counts pages, 'lecture' counts lectures"
    )
    total_amount: int = Field(..., alias="totalAmount",
                              description="Total pages or lectures", ge=0)
    completed_amount: int = Field(
        default=0, alias="completedAmount", description="Pages or lectures already done", ge=0
    )
    start_date: date = Field(..., alias="startDate",
                             description="Inclusive start date (YYYY-MM-DD)")
    end_date: date = Field(..., alias="endDate",
                           description="Inclusive end date (YYYY-MM-DD)")
    is_active: bool = Field(default=True, alias="isActive",
                            description="Inactive plans are never distributed")
    priority: int = Field(default=0, description="Lower values are scheduled first")
    material: Optional[str] = Field(
        default=None, description="Textbook or lecture name used in mission titles"
    )

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "id": 1,
                "title": "수학 개념원리 완독",
                "subject": "수학",
                "type": "textbook",
                "totalAmount": 300,
                "completedAmount": 20,
                "startDate": "2025-01-06",
                "endDate": "2025-03-30",
                "isActive": True,
                "priority": 1,
                "material": "개념원리 수학I"
            }
        }

    def to_model(self) -> StudyPlan:
        return StudyPlan(
            plan_id=self.plan_id,
            title=self.title,
            subject=self.subject,
            plan_type=self.plan_type,
            total_amount=self.total_amount,
            completed_amount=self.completed_amount,
            start_date=self.start_date,
            end_date=self.end_date,
            is_active=self.is_active,
            priority=self.priority,
            material=self.material,
        )


class RoutinePydantic(BaseModel):
    """Weekly recurring time block."""

    title: str = Field(default="", description="Display title of the routine")
    subject: Optional[str] = Field(
        default=None, description="Subject tag; only study routines with a subject add study time"
    )
    category: Literal["fixed", "study", "rest", "other"] = Field(
        default="other", description="Routine category"
    )
    start_time: str = Field(..., alias="startTime", description="Start time in HH:MM")
    end_time: str = Field(..., alias="endTime", description="End time in HH:MM")
    days: List[bool] = Field(
        ...,
        description="Active weekdays, index 0 = Sunday ... 6 = Saturday",
        min_length=7,
        max_length=7
    )

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "title": "수학 자습",
                "subject": "수학",
                "category": "study",
                "startTime": "19:00",
                "endTime": "20:30",
                "days": [False, True, False, True, False, True, False]
            }
        }

    @field_validator("start_time", "end_time")
    @classmethod
    def validate_time(cls, v: str) -> str:
        """Ensure time is in HH:MM format."""
        if not TIME_PATTERN.match(v):
            raise ValueError(f"time must be in HH:MM format, got: {v}")
        return v

    def to_model(self) -> Routine:
        return Routine(
            category=self.category,
            start_time=self.start_time,
            end_time=self.end_time,
            days=tuple(self.days),
            subject=self.subject,
            title=self.title,
        )


class DistributionOptionsPydantic(BaseModel):
    """Window and switches for one distribution run."""

    start_date: date = Field(..., alias="startDate",
                             description="Inclusive first day of the distribution window")
    end_date: date = Field(..., alias="endDate",
                           description="Inclusive last day of the distribution window")
    member_id: int = Field(..., alias="memberId",
                           description="Member the missions belong to")
    prioritize_high_priority: bool = Field(
        default=False, alias="prioritizeHighPriority", description="Process plans by ascending priority"
    )
    skip_weekends: bool = Field(
        default=False, alias="skipWeekends", description="Never place missions on Saturday or Sunday"
    )

    class Config:
        populate_by_name = True

    def to_model(self) -> DistributionOptions:
        return DistributionOptions(
            start_date=self.start_date,
            end_date=self.end_date,
            member_id=self.member_id,
            prioritize_high_priority=self.prioritize_high_priority,
            skip_weekends=self.skip_weekends,
        )
