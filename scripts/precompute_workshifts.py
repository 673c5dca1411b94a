"""Nightly work-shift precompute, meant to be run from cron.

    0 2 * * * cd /srv/workforce-attendance && python scripts/precompute_workshifts.py
"""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.workforce_attendance.workforce_attendance.container import build_container
from src.workforce_attendance.workforce_attendance.main import configure_logging, load_settings


def main() -> int:
    settings = load_settings()
    configure_logging(settings)

    report = build_container(settings=settings).precompute_job.run()
    print(
        f"OK: employees={report.employees_seen} saved={report.workshifts_saved} "
        f"skipped={report.buckets_skipped} failed={len(report.failed_employee_ids)}"
    )
    return 1 if report.failed_employee_ids else 0


if __name__ == "__main__":
    sys.exit(main())
