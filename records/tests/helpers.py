"""Small builders shared by the records test modules."""
from __future__ import annotations

import datetime
import itertools
from decimal import Decimal

from django.utils import timezone

from records.models import AttendanceRecord, Course, Enrollment, Grade, Student

_sequence = itertools.count(1)


def make_student(first_name="Ada", last_name="Lovelace", **kwargs) -> Student:
    n = next(_sequence)
    kwargs.setdefault("email", f"student{n}@example.edu")
    kwargs.setdefault("date_of_birth", datetime.date(2001, 6, 1))
    return Student.objects.create(first_name=first_name, last_name=last_name, **kwargs)


def make_course(name=None, credits=3, **kwargs) -> Course:
    if name is None:
        name = f"Course {next(_sequence)}"
    return Course.objects.create(name=name, credits=credits, **kwargs)


def enroll(student, course, **kwargs) -> Enrollment:
    return Enrollment.objects.create(student=student, course=course, **kwargs)


def add_grade(enrollment, score, assessment_type=None) -> Grade:
    if assessment_type is None:
        assessment_type = f"Assessment {next(_sequence)}"
    return Grade.objects.create(enrollment=enrollment, assessment_type=assessment_type, score=Decimal(str(score)))


def add_attendance(enrollment, statuses) -> list[AttendanceRecord]:
    """Record ``statuses`` on consecutive past days, most recent last."""
    today = timezone.localdate()
    records = []
    for days_ago, status in enumerate(reversed(statuses), start=1):
        records.append(
            AttendanceRecord.objects.create(
                enrollment=enrollment,
                attendance_date=today - datetime.timedelta(days=days_ago),
                status=status,
            )
        )
    return records
