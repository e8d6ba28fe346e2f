# Generated manually for initial Django models
import datetime

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Course",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100, unique=True, verbose_name="Course name")),
                ("credits", models.PositiveIntegerField(verbose_name="Credits")),
                ("instructor", models.CharField(blank=True, max_length=100, verbose_name="Instructor")),
                ("description", models.TextField(blank=True, verbose_name="Description")),
            ],
            options={
                "verbose_name": "course",
                "verbose_name_plural": "courses",
                "ordering": ["name"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("credits__gt", 0)),
                        name="chk_course_credits_positive",
                        violation_error_message="A course must be worth at least one credit.",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Student",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("first_name", models.CharField(max_length=50, verbose_name="First name")),
                ("last_name", models.CharField(max_length=50, verbose_name="Last name")),
                ("email", models.EmailField(max_length=100, unique=True, verbose_name="Email")),
                ("date_of_birth", models.DateField(verbose_name="Date of birth")),
            ],
            options={
                "verbose_name": "student",
                "verbose_name_plural": "students",
                "ordering": ["last_name", "first_name"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(
                            ("date_of_birth__gte", datetime.date(1900, 1, 1)),
                            ("date_of_birth__lte", datetime.date(2010, 12, 31)),
                        ),
                        name="chk_dob_reasonable",
                        violation_error_message="Date of birth must fall between 1900-01-01 and 2010-12-31.",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Enrollment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "enrollment_date",
                    models.DateField(default=django.utils.timezone.localdate, verbose_name="Enrollment date"),
                ),
                (
                    "course",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="enrollments",
                        to="records.course",
                        verbose_name="Course",
                    ),
                ),
                (
                    "student",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="enrollments",
                        to="records.student",
                        verbose_name="Student",
                    ),
                ),
            ],
            options={
                "verbose_name": "enrollment",
                "verbose_name_plural": "enrollments",
                "ordering": ["enrollment_date", "pk"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("student", "course"),
                        name="unique_student_course",
                        violation_error_message="The student is already enrolled in this course.",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Grade",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("assessment_type", models.CharField(max_length=50, verbose_name="Assessment type")),
                ("score", models.DecimalField(decimal_places=2, max_digits=5, verbose_name="Score")),
                ("graded_at", models.DateField(default=django.utils.timezone.localdate, verbose_name="Graded at")),
                (
                    "enrollment",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="grades",
                        to="records.enrollment",
                        verbose_name="Enrollment",
                    ),
                ),
            ],
            options={
                "verbose_name": "grade",
                "verbose_name_plural": "grades",
                "ordering": ["graded_at", "pk"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("score__gte", 0), ("score__lte", 100)),
                        name="chk_grade_score_range",
                        violation_error_message="Scores must be between 0 and 100.",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="AttendanceRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("attendance_date", models.DateField(verbose_name="Attendance date")),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("Present", "Present"),
                            ("Absent", "Absent"),
                            ("Late", "Late"),
                            ("Excused", "Excused"),
                        ],
                        max_length=10,
                        verbose_name="Status",
                    ),
                ),
                ("notes", models.TextField(blank=True, verbose_name="Notes")),
                (
                    "enrollment",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="attendance_records",
                        to="records.enrollment",
                        verbose_name="Enrollment",
                    ),
                ),
            ],
            options={
                "verbose_name": "attendance record",
                "verbose_name_plural": "attendance records",
                "ordering": ["attendance_date", "pk"],
                "indexes": [models.Index(fields=["attendance_date"], name="idx_attendance_date")],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("enrollment", "attendance_date"),
                        name="unique_enrollment_date",
                        violation_error_message="Attendance for this enrollment is already recorded on that date.",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("status__in", ["Present", "Absent", "Late", "Excused"])),
                        name="chk_attendance_status",
                    ),
                ],
            },
        ),
    ]
