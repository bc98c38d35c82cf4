from __future__ import annotations

from datetime import date, datetime

from hr_console.attendance.service import AttendanceService
from hr_console.core.enums import ClockStatus
from hr_console.store.seed import build_demo_state
from hr_console.store.state import DomainState, DomainStore

TODAY = date(2024, 8, 20)


def _seeded() -> tuple[AttendanceService, DomainStore]:
    store = DomainStore(build_demo_state(today=TODAY))
    return AttendanceService(store), store


def test_check_in_creates_one_open_record():
    store = DomainStore(DomainState())
    svc = AttendanceService(store)
    now = datetime(2024, 8, 20, 9, 0, 0)

    rec = svc.check_in(101, now=now)

    records = store.state.attendance_records
    assert records == (rec,)
    assert rec.record_id == 1
    assert rec.date == now.date()
    assert rec.check_in_time == now
    assert rec.check_out_time is None
    assert svc.status(101) == ClockStatus.CHECKED_IN


def test_check_out_closes_latest_open_record():
    store = DomainStore(DomainState())
    svc = AttendanceService(store)
    t = datetime(2024, 8, 20, 9, 0, 0)
    svc.check_in(101, now=t)

    later = datetime(2024, 8, 20, 17, 30, 0)
    svc.check_out(101, now=later)

    rec = store.state.attendance_records[0]
    assert rec.check_out_time == later
    assert rec.check_out_time >= rec.check_in_time
    assert svc.status(101) == ClockStatus.CHECKED_OUT


def test_double_check_in_opens_second_record():
    svc, store = _seeded()
    # 101 is already checked in from the seed data
    assert svc.status(101) == ClockStatus.CHECKED_IN

    svc.check_in(101, now=datetime(2024, 8, 20, 13, 0))

    open_records = [r for r in store.state.attendance_records if r.employee_id == 101 and r.is_open]
    assert len(open_records) == 2


def test_check_out_after_double_check_in_closes_newest_only():
    svc, store = _seeded()
    svc.check_in(101, now=datetime(2024, 8, 20, 13, 0))

    svc.check_out(101, now=datetime(2024, 8, 20, 18, 0))

    by_id = {r.record_id: r for r in store.state.attendance_records}
    assert by_id[6].check_out_time == datetime(2024, 8, 20, 18, 0)
    assert by_id[5].check_out_time is None
    # latest record (6) is closed, so the derived status is Checked Out
    assert svc.status(101) == ClockStatus.CHECKED_OUT


def test_check_out_without_open_record_is_noop():
    svc, store = _seeded()
    before = store.state

    svc.check_out(102, now=datetime(2024, 8, 20, 18, 0))

    assert store.state is before


def test_status_map_from_seed():
    svc, _ = _seeded()

    statuses = svc.status_map()

    assert statuses[101] == ClockStatus.CHECKED_IN
    assert statuses[103] == ClockStatus.CHECKED_IN
    assert statuses[102] == ClockStatus.CHECKED_OUT
    assert statuses[105] == ClockStatus.CHECKED_OUT


def test_roster_filters_by_full_name():
    svc, _ = _seeded()

    rows = svc.roster("IS LE")

    assert [(r.employee.employee_id, r.status) for r in rows] == [(105, ClockStatus.CHECKED_OUT)]


def test_log_ui_rows_newest_first():
    svc, _ = _seeded()

    rows = svc.log_ui(101)

    assert [r["record_id"] for r in rows] == [5, 1]
    assert rows[0]["date"] == "2024-08-20"
    assert rows[0]["check_out"] == "N/A"
    assert rows[0]["hours_worked"] == "-"
    assert rows[1]["check_in"] == "09:02"
    assert rows[1]["hours_worked"] == "8.05 hrs"
