"""Export daily time tracking summaries to CSV or Excel.

Input is a JSON array of ``barber_time_entries`` rows (id, barber_id,
entry_type, timestamp, note) and, optionally, a JSON object mapping
barber_id -> display name.

    python scripts/export_timesheet.py entries.json --names barbers.json \
        --start 2026-10-12 --end 2026-10-18 --format xlsx
"""

from __future__ import annotations

import argparse
import json
import sys
from datetime import timedelta
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.barber_timeclock.barber_timeclock.common.datetime_utils import now_utc, parse_iso_date
from src.barber_timeclock.barber_timeclock.core.constants import DEFAULT_REPORT_DAYS
from src.barber_timeclock.barber_timeclock.core.exceptions import DomainError, ValidationError
from src.barber_timeclock.barber_timeclock.main import create_container, load_settings
from src.barber_timeclock.barber_timeclock.reports.export import summaries_to_csv, summaries_to_excel
from src.barber_timeclock.barber_timeclock.timeclock.model import TimeEntry


class JsonEntries:
    """Read-only entry source over an exported JSON file."""

    def __init__(self, path: Path):
        with path.open("r", encoding="utf-8") as f:
            rows = json.load(f)
        if not isinstance(rows, list):
            raise ValidationError(f"{path} must contain a JSON array of time entries")
        self._entries = [TimeEntry.from_dict(row) for row in rows]

    def list_entries(self, *, start, end, barber_id=None):
        rows = [
            e
            for e in self._entries
            if start <= e.timestamp < end and (barber_id is None or e.barber_id == barber_id)
        ]
        rows.sort(key=lambda e: e.timestamp)
        return rows


class JsonBarberNames:
    def __init__(self, path: Path | None):
        self._names: dict[str, str] = {}
        if path is not None:
            with path.open("r", encoding="utf-8") as f:
                names = json.load(f)
            if not isinstance(names, dict):
                raise ValidationError(f"{path} must contain a JSON object of barber_id -> name")
            self._names = {str(k): str(v) for k, v in names.items()}

    def get_display_names(self):
        return self._names


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Export barber time tracking summaries")
    parser.add_argument("entries", type=Path, help="JSON file with time entry rows")
    parser.add_argument("--names", type=Path, default=None, help="JSON object of barber_id -> name")
    parser.add_argument("--start", default=None, help="First day (YYYY-MM-DD)")
    parser.add_argument("--end", default=None, help="Last day (YYYY-MM-DD), defaults to today")
    parser.add_argument("--barber", default=None, help="Only this barber_id")
    parser.add_argument("--format", choices=["csv", "xlsx"], default="csv")
    parser.add_argument("--out-dir", type=Path, default=None)
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    settings = load_settings()

    try:
        entries = JsonEntries(args.entries)
        names = JsonBarberNames(args.names)
    except FileNotFoundError as e:
        raise SystemExit(f"Input file not found: {e.filename}")
    except json.JSONDecodeError as e:
        raise SystemExit(f"Input file is not valid JSON: {e}")
    except DomainError as e:
        raise SystemExit(f"Export failed: {e}")

    try:
        container = create_container(entries, names, settings=settings)

        now = now_utc()
        end = parse_iso_date(args.end) if args.end else now.astimezone(container.day_tz).date()
        report_days = int(getattr(settings, "REPORT_DAYS", DEFAULT_REPORT_DAYS))
        start = parse_iso_date(args.start) if args.start else end - timedelta(days=report_days - 1)

        report = container.report_service.build_report(start=start, end=end, barber_id=args.barber, now=now)
    except DomainError as e:
        raise SystemExit(f"Export failed: {e}")

    out_dir = args.out_dir or Path(settings.EXPORT_DIR)
    out_dir.mkdir(parents=True, exist_ok=True)
    out_file = out_dir / f"time-tracking-{start.isoformat()}_{end.isoformat()}.{args.format}"

    payload = summaries_to_excel(report.rows) if args.format == "xlsx" else summaries_to_csv(report.rows)
    out_file.write_bytes(payload)
    print(f"OK: {len(report.rows)} barber days exported -> {out_file}")


if __name__ == "__main__":
    main()
