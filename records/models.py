"""Django models for students, course enrollments, grades and attendance."""
from __future__ import annotations

import datetime

from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q
from django.utils import timezone

EARLIEST_BIRTH_DATE = datetime.date(1900, 1, 1)
LATEST_BIRTH_DATE = datetime.date(2010, 12, 31)


class Student(models.Model):
    first_name = models.CharField("First name", max_length=50)
    last_name = models.CharField("Last name", max_length=50)
    email = models.EmailField("Email", max_length=100, unique=True)
    date_of_birth = models.DateField("Date of birth")

    class Meta:
        verbose_name = "student"
        verbose_name_plural = "students"
        ordering = ["last_name", "first_name"]
        constraints = [
            models.CheckConstraint(
                condition=Q(date_of_birth__gte=EARLIEST_BIRTH_DATE)
                & Q(date_of_birth__lte=LATEST_BIRTH_DATE),
                name="chk_dob_reasonable",
                violation_error_message="Date of birth must fall between 1900-01-01 and 2010-12-31.",
            ),
        ]

    def __str__(self) -> str:  # pragma: no cover - human readable labels
        return f"{self.full_name} <{self.email}>"

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def save(self, *args, **kwargs):
        self.full_clean()
        return super().save(*args, **kwargs)


class Course(models.Model):
    name = models.CharField("Course name", max_length=100, unique=True)
    credits = models.PositiveIntegerField("Credits")
    instructor = models.CharField("Instructor", max_length=100, blank=True)
    description = models.TextField("Description", blank=True)

    class Meta:
        verbose_name = "course"
        verbose_name_plural = "courses"
        ordering = ["name"]
        constraints = [
            models.CheckConstraint(
                condition=Q(credits__gt=0),
                name="chk_course_credits_positive",
                violation_error_message="A course must be worth at least one credit.",
            ),
        ]

    def __str__(self) -> str:  # pragma: no cover - human readable labels
        return f"{self.name} ({self.credits} cr)"

    def save(self, *args, **kwargs):
        self.full_clean()
        return super().save(*args, **kwargs)


class Enrollment(models.Model):
    student = models.ForeignKey(Student, on_delete=models.CASCADE, related_name="enrollments", verbose_name="Student")
    course = models.ForeignKey(Course, on_delete=models.CASCADE, related_name="enrollments", verbose_name="Course")
    enrollment_date = models.DateField("Enrollment date", default=timezone.localdate)

    class Meta:
        verbose_name = "enrollment"
        verbose_name_plural = "enrollments"
        ordering = ["enrollment_date", "pk"]
        constraints = [
            models.UniqueConstraint(
                fields=["student", "course"],
                name="unique_student_course",
                violation_error_message="The student is already enrolled in this course.",
            ),
        ]

    def __str__(self) -> str:  # pragma: no cover - human readable labels
        return f"{self.student.full_name} -> {self.course.name}"

    def save(self, *args, **kwargs):
        self.full_clean()
        return super().save(*args, **kwargs)


class Grade(models.Model):
    enrollment = models.ForeignKey(Enrollment, on_delete=models.CASCADE, related_name="grades", verbose_name="Enrollment")
    assessment_type = models.CharField("Assessment type", max_length=50)
    score = models.DecimalField("Score", max_digits=5, decimal_places=2)
    graded_at = models.DateField("Graded at", default=timezone.localdate)

    class Meta:
        verbose_name = "grade"
        verbose_name_plural = "grades"
        ordering = ["graded_at", "pk"]
        constraints = [
            models.CheckConstraint(
                condition=Q(score__gte=0) & Q(score__lte=100),
                name="chk_grade_score_range",
                violation_error_message="Scores must be between 0 and 100.",
            ),
        ]

    def __str__(self) -> str:  # pragma: no cover - human readable labels
        return f"{self.enrollment} {self.assessment_type}: {self.score}"

    def save(self, *args, **kwargs):
        self.full_clean()
        return super().save(*args, **kwargs)


class AttendanceRecord(models.Model):
    class Status(models.TextChoices):
        PRESENT = "Present", "Present"
        ABSENT = "Absent", "Absent"
        LATE = "Late", "Late"
        EXCUSED = "Excused", "Excused"

    enrollment = models.ForeignKey(
        Enrollment,
        on_delete=models.CASCADE,
        related_name="attendance_records",
        verbose_name="Enrollment",
    )
    attendance_date = models.DateField("Attendance date")
    status = models.CharField("Status", max_length=10, choices=Status.choices)
    notes = models.TextField("Notes", blank=True)

    class Meta:
        verbose_name = "attendance record"
        verbose_name_plural = "attendance records"
        ordering = ["attendance_date", "pk"]
        indexes = [
            models.Index(fields=["attendance_date"], name="idx_attendance_date"),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["enrollment", "attendance_date"],
                name="unique_enrollment_date",
                violation_error_message="Attendance for this enrollment is already recorded on that date.",
            ),
            models.CheckConstraint(
                condition=Q(status__in=["Present", "Absent", "Late", "Excused"]),
                name="chk_attendance_status",
            ),
        ]

    def __str__(self) -> str:  # pragma: no cover - human readable labels
        return f"{self.enrollment} {self.attendance_date}: {self.status}"

    def clean(self):
        super().clean()
        # SQLite rejects CURRENT_DATE inside CHECK constraints.
        if self.attendance_date and self.attendance_date > timezone.localdate():
            raise ValidationError({"attendance_date": "Attendance cannot be recorded for a future date."})

    def save(self, *args, **kwargs):
        self.full_clean()
        return super().save(*args, **kwargs)
