from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date

from ..state.model import AppState
from . import metrics


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: list[dict]


class ReportService:
    """Builds dashboard/report payloads from an application state snapshot."""

    def dashboard(self, state: AppState, *, today: date) -> dict:
        return {
            "active_employees": metrics.active_employee_count(state.employees),
            "shifts_today": len(metrics.shifts_on(state.shifts, today)),
            "hours_today": int(metrics.round_half_up(metrics.hours_on(state.time_entries, today))),
            "attendance_rate": metrics.attendance_rate(state.time_entries),
            "recent_alerts": [
                {"id": n.id, "title": n.title, "message": n.message, "type": n.type.value}
                for n in state.notifications[:3]
            ],
        }

    def overview(self, state: AppState, *, today: date) -> dict:
        return {
            "total_hours": int(metrics.round_half_up(metrics.total_hours(state.time_entries))),
            "attendance_rate": metrics.attendance_rate(state.time_entries),
            "overtime_hours": int(metrics.round_half_up(metrics.overtime_hours(state.time_entries))),
            "payroll_cost": int(metrics.round_half_up(metrics.payroll_cost(state.employees, state.time_entries))),
            "weekly_attendance": [
                {
                    "day": d.day,
                    "date": d.date.strftime("%Y-%m-%d"),
                    "present": d.present,
                    "absent": d.absent,
                    "present_pct": round(d.present_pct, 1),
                }
                for d in metrics.weekly_attendance(state.time_entries, today)
            ],
            "departments": [
                asdict(s) for s in metrics.department_stats(state.departments, state.employees, state.time_entries)
            ],
            "schedule": metrics.week_schedule_counts(state.shifts, today),
            "workforce": {
                "employees": len(state.employees),
                "active": metrics.active_employee_count(state.employees),
                "departments": len(state.departments),
                "average_hourly_rate": metrics.average_hourly_rate(state.employees),
            },
        }

    def build_timesheet_report(self, state: AppState, *, start: date, end: date) -> ReportData:
        """Entry rows in [start, end] plus per-employee hours and pay."""

        rates = {e.id: e.hourly_rate for e in state.employees}
        rows: list[dict] = []
        summary_map: dict[str, dict] = {}

        for entry in state.time_entries:
            if not (start <= entry.date <= end):
                continue

            rows.append(
                {
                    "date": entry.date.strftime("%Y-%m-%d"),
                    "employee_id": entry.employee_id,
                    "employee_name": entry.employee_name,
                    "clock_in": entry.clock_in,
                    "clock_out": entry.clock_out or "-",
                    "total_hours": f"{entry.total_hours:.2f}",
                    "status": entry.status.value,
                    "overtime": "yes" if entry.overtime else "no",
                }
            )

            s = summary_map.get(entry.employee_id)
            if not s:
                s = {"employee_id": entry.employee_id, "employee_name": entry.employee_name, "hours": 0.0}
                summary_map[entry.employee_id] = s
            s["hours"] += entry.total_hours

        summary = []
        for s in summary_map.values():
            rate = rates.get(s["employee_id"], 0.0)
            summary.append(
                {
                    "employee_id": s["employee_id"],
                    "employee_name": s["employee_name"],
                    "total_hours": round(s["hours"], 2),
                    "pay": round(s["hours"] * rate, 2),
                }
            )

        summary.sort(key=lambda x: x["total_hours"], reverse=True)
        return ReportData(rows=rows, summary=summary)
