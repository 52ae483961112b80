"""
calkit.schedule
~~~~~~~~~~~~~~~

Work/off-day rotation schedules.  A WorkCycle is a repeating run of working
days followed by days off; anchored at the start of an inclusive DatePeriod
it yields the working dates inside that period.

Basic usage::

    from calkit.schedule import work_schedule

    work_schedule({"start": "01-01-2024", "end": "15-01-2024"}, 1, 3)
    # → ['01-01-2024', '05-01-2024', '09-01-2024', '13-01-2024']

Working with the cycle directly::

    from calkit.schedule import DatePeriod, WorkCycle

    cycle = WorkCycle(work_days=4, off_days=3)
    cycle.mask(10)                                   # numpy bool array
    cycle.working_dates(DatePeriod.parse("01-03-2024", "31-03-2024"))

Public API
----------
work_schedule  DD-MM-YYYY working dates for a period and cycle.
WorkCycle      The repeating work/off pattern.
DatePeriod     Inclusive date range.
"""

from __future__ import annotations

from calkit.schedule.cycle import DatePeriod, WorkCycle, work_schedule

__all__ = [
    "DatePeriod",
    "WorkCycle",
    "work_schedule",
]
