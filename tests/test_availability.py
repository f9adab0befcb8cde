from availability import ACTIVE_DAY_MINUTES, active_weekday_count, calculate_available_study_time, extract_subject_weekly_time

NO_DAYS = (False,) * 7
MONDAY = (False, True, False, False, False, False, False)
MON_WED = (False, True, False, True, False, False, False)
TUESDAY = (False, False, True, False, False, False, False)


def test_extracts_minutes_and_slots_per_weekday(make_routine) -> None:
    result = extract_subject_weekly_time([make_routine(start_time="19:00", end_time="20:30")])

    assert len(result) == 1
    math = result[0]
    assert math.subject == "Math"
    assert math.total_minutes == 270
    assert math.daily_minutes == [0, 90, 0, 90, 0, 90, 0]
    assert [s.day_index for s in math.slots] == [1, 3, 5]
    assert all(s.minutes == 90 and s.start_time == "19:00" for s in math.slots)
    assert active_weekday_count(math) == 3


def test_routines_for_same_subject_accumulate(make_routine) -> None:
    result = extract_subject_weekly_time(
        [
            make_routine(days=MONDAY, start_time="08:00", end_time="09:00"),
            make_routine(days=MON_WED, start_time="19:00", end_time="19:30"),
        ]
    )

    math = result[0]
    assert math.total_minutes == 120
    assert math.daily_minutes[1] == 90
    assert math.daily_minutes[3] == 30
    assert len(math.slots) == 3
    assert math.slot_for(1).start_time == "08:00"
    assert active_weekday_count(math) == 2


def test_ignores_non_study_and_subjectless_routines(make_routine) -> None:
    result = extract_subject_weekly_time(
        [
            make_routine(category="rest"),
            make_routine(subject=None),
            make_routine(subject="", category="study"),
        ]
    )
    assert result == []


def test_routine_without_weekdays_contributes_nothing(make_routine) -> None:
    assert extract_subject_weekly_time([make_routine(days=NO_DAYS)]) == []


def test_subjects_keep_first_seen_order(make_routine) -> None:
    result = extract_subject_weekly_time(
        [
            make_routine(subject="English", days=TUESDAY),
            make_routine(subject="Math"),
            make_routine(subject="English", days=MONDAY),
        ]
    )
    assert [s.subject for s in result] == ["English", "Math"]


def test_available_study_time_counts_every_category(make_routine) -> None:
    routines = [
        make_routine(days=MON_WED, start_time="19:00", end_time="20:30"),
        make_routine(category="rest", subject=None, days=MONDAY, start_time="13:00", end_time="14:00"),
        make_routine(subject=None, days=TUESDAY, start_time="10:00", end_time="11:00"),
    ]

    available = calculate_available_study_time(routines)

    assert available.by_subject == {"Math": 180}
    assert available.total_weekly_minutes == 180
    assert available.by_day == [0, 90, 0, 90, 0, 0, 0]
    assert available.free_time_by_day[0] == ACTIVE_DAY_MINUTES
    assert available.free_time_by_day[1] == ACTIVE_DAY_MINUTES - 150
    assert available.free_time_by_day[2] == ACTIVE_DAY_MINUTES - 60
    assert available.free_time_by_day[3] == ACTIVE_DAY_MINUTES - 90


def test_free_time_never_negative(make_routine) -> None:
    sunday = (True, False, False, False, False, False, False)
    available = calculate_available_study_time(
        [make_routine(category="other", subject=None, days=sunday, start_time="00:00", end_time="24:00")]
    )
    assert available.free_time_by_day[0] == 0
    assert available.total_weekly_minutes == 0
