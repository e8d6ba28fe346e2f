"""Print the GPA, attendance and risk reporting views."""
from __future__ import annotations

from django.core.management.base import BaseCommand

from records.reports import attendance_summary, gpa_summary, risk_report


def _fmt(value) -> str:
    return "-" if value is None else str(value)


class Command(BaseCommand):
    help = "Show GPA, attendance and risk summaries for all students"

    def add_arguments(self, parser):
        parser.add_argument(
            "--view",
            choices=["gpa", "attendance", "risk", "all"],
            default="all",
            help="Which summary to print (default: all)",
        )

    def handle(self, *args, **options):
        view = options["view"]
        if view in ("gpa", "all"):
            self._print_gpa()
        if view in ("attendance", "all"):
            self._print_attendance()
        if view in ("risk", "all"):
            self._print_risk()

    def _print_gpa(self):
        self.stdout.write(self.style.MIGRATE_HEADING("GPA summary"))
        self.stdout.write("Student                        | GPA  | Courses | Avg score")
        for row in gpa_summary():
            self.stdout.write(
                f"{row.full_name:30} | {row.gpa:4} | {row.num_courses_enrolled:7} | {_fmt(row.overall_avg_score)}"
            )

    def _print_attendance(self):
        self.stdout.write(self.style.MIGRATE_HEADING("Attendance summary"))
        self.stdout.write("Student                        | Records | Present | %")
        for row in attendance_summary():
            self.stdout.write(
                f"{row.full_name:30} | {row.total_attendance_records:7} | {row.present_count:7} | "
                f"{row.attendance_percentage}"
            )

    def _print_risk(self):
        report = risk_report()
        self.stdout.write(self.style.MIGRATE_HEADING("Risk summary"))
        self.stdout.write("Student                        | GPA  | Attendance % | Risk level")
        for row in report.assessed:
            self.stdout.write(
                f"{row.full_name:30} | {row.gpa:4} | {row.attendance_percentage:12} | {row.risk_label}"
            )
        for row in report.unassessed:
            self.stdout.write(self.style.WARNING(f"{row.full_name}: not assessed (no {row.missing})"))
