"""Read-only reporting views: GPA, attendance and academic risk summaries.

Every call recomputes from the database; nothing is cached between reads.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional

from django.db import models
from django.db.models import Count, Q

from .grading import ONE_PLACE, ZERO_GPA, grade_totals_by_student
from .models import AttendanceRecord, Student

logger = logging.getLogger(__name__)

GPA_RISK_THRESHOLD = Decimal("2.0")
ATTENDANCE_RISK_THRESHOLD = Decimal("70")


class RiskLevel(models.IntegerChoices):
    """Risk categories; the value is the severity rank (1 is most severe)."""

    HIGH = 1, "High Risk (GPA & Attendance)"
    ACADEMIC = 2, "Academic Risk (Low GPA)"
    ATTENDANCE = 3, "Attendance Risk"
    MODERATE = 4, "Moderate / No Immediate Risk"


@dataclass(frozen=True)
class GpaSummaryRow:
    student_id: int
    full_name: str
    gpa: Decimal
    num_courses_enrolled: int
    overall_avg_score: Optional[Decimal]


@dataclass(frozen=True)
class AttendanceSummaryRow:
    student_id: int
    full_name: str
    total_attendance_records: int
    present_count: int
    attendance_percentage: Decimal


@dataclass(frozen=True)
class RiskSummaryRow:
    student_id: int
    full_name: str
    gpa: Decimal
    attendance_percentage: Decimal
    risk_level: RiskLevel
    num_courses_enrolled: int
    total_attendance_records: int

    @property
    def risk_label(self) -> str:
        return self.risk_level.label


@dataclass(frozen=True)
class UnassessedStudent:
    """A student left out of the risk summary, with the data they lack."""

    student_id: int
    full_name: str
    missing: str = "attendance records"


@dataclass(frozen=True)
class RiskReport:
    assessed: List[RiskSummaryRow] = field(default_factory=list)
    unassessed: List[UnassessedStudent] = field(default_factory=list)


def _as_decimal(value) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def classify_risk(gpa, attendance_percentage) -> RiskLevel:
    low_gpa = _as_decimal(gpa) < GPA_RISK_THRESHOLD
    low_attendance = _as_decimal(attendance_percentage) < ATTENDANCE_RISK_THRESHOLD
    if low_gpa and low_attendance:
        return RiskLevel.HIGH
    if low_gpa:
        return RiskLevel.ACADEMIC
    if low_attendance:
        return RiskLevel.ATTENDANCE
    return RiskLevel.MODERATE


def gpa_summary() -> List[GpaSummaryRow]:
    """One row per student, best GPA first.

    Students without enrollments or grades are included with a GPA of 0.00
    and no average score. Ties keep student id order.
    """
    totals = grade_totals_by_student()
    students = Student.objects.annotate(
        num_courses_enrolled=Count("enrollments__course", distinct=True),
    ).order_by("pk")

    rows = []
    for student in students:
        student_totals = totals.get(student.pk, {})
        rows.append(
            GpaSummaryRow(
                student_id=student.pk,
                full_name=student.full_name,
                gpa=student_totals.get("gpa", ZERO_GPA),
                num_courses_enrolled=student.num_courses_enrolled,
                overall_avg_score=student_totals.get("overall_avg_score"),
            )
        )
    rows.sort(key=lambda row: row.gpa, reverse=True)
    logger.debug("GPA summary produced %d rows", len(rows))
    return rows


def attendance_summary() -> List[AttendanceSummaryRow]:
    """Attendance totals for students with at least one attendance record."""
    present = Q(enrollments__attendance_records__status=AttendanceRecord.Status.PRESENT)
    students = (
        Student.objects.annotate(
            total_attendance_records=Count("enrollments__attendance_records"),
            present_count=Count("enrollments__attendance_records", filter=present),
        )
        .filter(total_attendance_records__gt=0)
        .order_by("pk")
    )

    rows = []
    for student in students:
        percentage = Decimal(100 * student.present_count) / student.total_attendance_records
        rows.append(
            AttendanceSummaryRow(
                student_id=student.pk,
                full_name=student.full_name,
                total_attendance_records=student.total_attendance_records,
                present_count=student.present_count,
                attendance_percentage=percentage.quantize(ONE_PLACE, rounding=ROUND_HALF_UP),
            )
        )
    rows.sort(key=lambda row: row.attendance_percentage, reverse=True)
    logger.debug("Attendance summary produced %d rows", len(rows))
    return rows


def risk_report() -> RiskReport:
    """Classify every student who has both GPA and attendance data.

    Students without attendance records cannot be classified and are listed
    in ``unassessed`` instead of being dropped. Assessed rows are ordered by
    severity; within a level the GPA summary order is kept.
    """
    attendance = {row.student_id: row for row in attendance_summary()}
    assessed = []
    unassessed = []
    for gpa_row in gpa_summary():
        attendance_row = attendance.get(gpa_row.student_id)
        if attendance_row is None:
            unassessed.append(UnassessedStudent(student_id=gpa_row.student_id, full_name=gpa_row.full_name))
            continue
        assessed.append(
            RiskSummaryRow(
                student_id=gpa_row.student_id,
                full_name=gpa_row.full_name,
                gpa=gpa_row.gpa,
                attendance_percentage=attendance_row.attendance_percentage,
                risk_level=classify_risk(gpa_row.gpa, attendance_row.attendance_percentage),
                num_courses_enrolled=gpa_row.num_courses_enrolled,
                total_attendance_records=attendance_row.total_attendance_records,
            )
        )
    assessed.sort(key=lambda row: row.risk_level.value)
    if unassessed:
        logger.info("%d student(s) left out of the risk summary for lack of attendance records", len(unassessed))
    return RiskReport(assessed=assessed, unassessed=unassessed)


def risk_summary() -> List[RiskSummaryRow]:
    return risk_report().assessed
