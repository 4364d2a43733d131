"""Example: drive the tracker through the service layer (no Flask).

Controllers are a thin layer; the page behavior lives in TrackerController.
"""

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from attendance_tracker.common.datetime_utils import today_local
from attendance_tracker.container import build_container
from attendance_tracker.tracker.view import build_rows, summarize


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    tracker = container.tracker(today_local())
    tracker.refresh()
    for row in build_rows(tracker.state):
        print(row.employee.employee_id, row.employee.name, row.check_in, row.check_out, row.action.value)
    print(summarize(tracker.state))


if __name__ == "__main__":
    main()
