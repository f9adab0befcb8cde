from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pandas as pd

from models import AvailableStudyTime, DistributionOptions, DistributionResult, GeneratedMission, WeeklySummary
from plan_loader import load_plans_from_json, load_routines_from_json
from planner_core import distribute_plans_to_missions
from summaries import calculate_available_study_time, generate_weekly_summary
from time_utils import WEEKDAY_KEYS, minutes_to_time, week_start_of

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
logger = logging.getLogger(__name__)

MISSION_COLUMNS = [
    "date",
    "subject",
    "title",
    "target_amount",
    "start_time",
    "end_time",
    "plan_id",
    "member_id",
    "status",
]


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Distribute long-term study plans into daily missions")
    parser.add_argument("--config", type=str, help="Path to config JSON")
    parser.add_argument("--plans", type=str, help="JSON file with study plans")
    parser.add_argument("--routines", type=str, help="JSON file with weekly routines")
    parser.add_argument("--start-date", dest="start_date", type=str, help="First day to distribute (YYYY-MM-DD)")
    parser.add_argument("--end-date", dest="end_date", type=str, help="Last day to distribute (YYYY-MM-DD)")
    parser.add_argument("--days", type=int, help="Window length when no end date is given")
    parser.add_argument("--member-id", dest="member_id", type=int, help="Member the missions belong to")
    parser.add_argument("--prioritize", dest="prioritize_high_priority", action="store_true", help="Process plans by ascending priority")
    parser.add_argument("--no-prioritize", dest="prioritize_high_priority", action="store_false", help="Keep input plan order")
    parser.add_argument("--skip-weekends", dest="skip_weekends", action="store_true", help="Never place missions on weekends")
    parser.add_argument("--no-skip-weekends", dest="skip_weekends", action="store_false", help="Allow missions on weekends")
    parser.set_defaults(prioritize_high_priority=None, skip_weekends=None)
    parser.add_argument("--output-dir", dest="output_dir", type=str, help="Directory to write results")
    parser.add_argument("--csv", dest="write_csv", action="store_true", default=None, help="Also write missions.csv")
    return parser.parse_args(argv)


def load_config(args: argparse.Namespace, today: date) -> Dict:
    config = {
        "plans": "plans.json",
        "routines": "routines.json",
        "start_date": today.isoformat(),
        "end_date": None,
        "days": 7,
        "member_id": 0,
        "prioritize_high_priority": True,
        "skip_weekends": False,
        "output_dir": "Missions_Output",
        "write_csv": False,
    }

    if args.config:
        with open(args.config, "r", encoding="utf-8") as f:
            file_config = json.load(f)
            config.update(file_config)

    for key in config:
        value = getattr(args, key, None)
        if value is not None:
            config[key] = value

    return config


def parse_date(date_str: str) -> date:
    return datetime.strptime(date_str, "%Y-%m-%d").date()


def build_options(config: Dict) -> DistributionOptions:
    start = parse_date(config["start_date"])
    if config.get("end_date"):
        end = parse_date(config["end_date"])
    else:
        end = start + timedelta(days=int(config["days"]) - 1)
    return DistributionOptions(
        start_date=start,
        end_date=end,
        member_id=int(config["member_id"]),
        prioritize_high_priority=bool(config["prioritize_high_priority"]),
        skip_weekends=bool(config["skip_weekends"]),
    )


def mission_to_dict(mission: GeneratedMission) -> Dict:
    payload = asdict(mission)
    payload["date"] = mission.date.isoformat()
    return payload


def build_distribution_output(options: DistributionOptions, result: DistributionResult) -> Dict:
    return {
        "member_id": options.member_id,
        "start_date": options.start_date.isoformat(),
        "end_date": options.end_date.isoformat(),
        "prioritize_high_priority": options.prioritize_high_priority,
        "skip_weekends": options.skip_weekends,
        "missions": [mission_to_dict(m) for m in result.missions],
        "warnings": list(result.warnings),
        "summary": {
            "total_missions": result.summary.total_missions,
            "by_subject": dict(result.summary.by_subject),
            "total_study_minutes": result.summary.total_study_minutes,
            "total_study_time": minutes_to_time(result.summary.total_study_minutes),
        },
    }


def build_weekly_output(summary: WeeklySummary) -> Dict:
    return {
        "week_start": summary.week_start.isoformat(),
        "week_end": summary.week_end.isoformat(),
        "subjects": [asdict(row) for row in summary.subjects],
    }


def build_available_time_output(available: AvailableStudyTime) -> Dict:
    return {
        "total_weekly_minutes": available.total_weekly_minutes,
        "by_subject": dict(available.by_subject),
        "by_day": dict(zip(WEEKDAY_KEYS, available.by_day)),
        "free_time_by_day": dict(zip(WEEKDAY_KEYS, available.free_time_by_day)),
    }


def missions_to_frame(missions: List[GeneratedMission]) -> pd.DataFrame:
    df = pd.DataFrame([asdict(m) for m in missions], columns=MISSION_COLUMNS)
    if not df.empty:
        df["date"] = pd.to_datetime(df["date"]).dt.strftime("%Y-%m-%d")
    return df


def write_json(path: Path, payload: Dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)
    logger.info("Wrote %s", path)


def write_csv(path: Path, missions: List[GeneratedMission]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    missions_to_frame(missions).to_csv(path, index=False, encoding="utf-8")
    logger.info("Wrote %s", path)


def run(config: Dict) -> DistributionResult:
    options = build_options(config)
    plans = load_plans_from_json(Path(config["plans"]))
    routines = load_routines_from_json(Path(config["routines"]))
    output_dir = Path(config["output_dir"])

    result = distribute_plans_to_missions(plans, routines, options)
    for warning in result.warnings:
        logger.warning("%s", warning)
    logger.info(
        "Distributed %d missions between %s and %s",
        result.summary.total_missions,
        options.start_date,
        options.end_date,
    )

    write_json(output_dir / "missions.json", build_distribution_output(options, result))
    weekly = generate_weekly_summary(week_start_of(options.start_date), plans, routines)
    write_json(output_dir / "weekly_summary.json", build_weekly_output(weekly))
    available = calculate_available_study_time(routines)
    write_json(output_dir / "available_study_time.json", build_available_time_output(available))
    if config.get("write_csv"):
        write_csv(output_dir / "missions.csv", result.missions)

    return result


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    config = load_config(args, today=date.today())
    try:
        run(config)
    except (OSError, ValueError) as exc:
        logger.exception("Distribution failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
