from datetime import date

from summaries import calculate_available_study_time, generate_weekly_summary

TUESDAY = (False, False, True, False, False, False, False)


def test_weekly_summary_projects_targets_per_subject(make_plan, make_routine) -> None:
    plans = [
        make_plan(plan_id=1, total_amount=100),
        make_plan(plan_id=2, total_amount=20),
        make_plan(plan_id=3, total_amount=500, is_active=False),
    ]
    routines = [make_routine(), make_routine(subject="English", days=TUESDAY)]

    summary = generate_weekly_summary(date(2024, 1, 1), plans, routines)

    assert summary.week_start == date(2024, 1, 1)
    assert summary.week_end == date(2024, 1, 7)
    math, english = summary.subjects
    # ceil(100 / 3) * 3 + ceil(20 / 3) * 3
    assert math.subject == "Math"
    assert math.total_target == 123
    assert math.weekly_missions == 3
    assert math.average_daily == 41
    assert (english.subject, english.total_target, english.weekly_missions, english.average_daily) == (
        "English",
        0,
        1,
        0,
    )


def test_weekly_summary_skips_subjects_without_routines(make_plan) -> None:
    summary = generate_weekly_summary(date(2024, 1, 1), [make_plan()], [])
    assert summary.subjects == []


def test_available_study_time_is_exposed(make_routine) -> None:
    available = calculate_available_study_time([make_routine()])
    assert available.by_subject == {"Math": 180}
