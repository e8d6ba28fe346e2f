"""Create a compact demo dataset covering every risk level."""
from __future__ import annotations

import datetime
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from records.models import AttendanceRecord, Course, Enrollment, Grade, Student

P = AttendanceRecord.Status.PRESENT
A = AttendanceRecord.Status.ABSENT
L = AttendanceRecord.Status.LATE
E = AttendanceRecord.Status.EXCUSED

COURSES = [
    ("Database Systems", 3, "Dr. Ada Lovelace", "Relational modelling and SQL"),
    ("Data Engineering", 4, "Dr. Grace Hopper", "Pipelines, warehousing and orchestration"),
    ("Statistics I", 3, "Dr. Florence Nightingale", ""),
]

# first name, last name, email, date of birth, {course: [scores]}, attendance pattern (most recent last)
STUDENTS = [
    ("Thandi", "Mokoena", "thandi@example.edu", datetime.date(2002, 3, 14),
     {"Database Systems": [82, 78], "Data Engineering": [91]}, [P, P, P, L, P]),
    ("Sipho", "Dlamini", "sipho@example.edu", datetime.date(2001, 7, 2),
     {"Database Systems": [45], "Statistics I": [38]}, [P, A, A, P, A]),
    ("Lerato", "Nkosi", "lerato@example.edu", datetime.date(2003, 11, 20),
     {"Statistics I": [48]}, [P, P, P, P]),
    ("Johan", "van Wyk", "johan@example.edu", datetime.date(2000, 1, 30),
     {"Data Engineering": [72]}, [A, A, P, E]),
    ("Naledi", "Khumalo", "naledi@example.edu", datetime.date(2004, 5, 8),
     {"Database Systems": [66]}, []),
]


class Command(BaseCommand):
    help = "Seed a small set of students, enrollments, grades and attendance for demos"

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write(self.style.WARNING("Creating compact demo records..."))
        today = timezone.localdate()

        courses = {}
        for name, credits, instructor, description in COURSES:
            courses[name], _ = Course.objects.get_or_create(
                name=name,
                defaults={"credits": credits, "instructor": instructor, "description": description},
            )

        for first_name, last_name, email, dob, scores_by_course, pattern in STUDENTS:
            student, _ = Student.objects.get_or_create(
                email=email,
                defaults={"first_name": first_name, "last_name": last_name, "date_of_birth": dob},
            )
            for course_name, scores in scores_by_course.items():
                enrollment, _ = Enrollment.objects.get_or_create(student=student, course=courses[course_name])
                for idx, score in enumerate(scores, start=1):
                    Grade.objects.get_or_create(
                        enrollment=enrollment,
                        assessment_type=f"Assessment {idx}",
                        defaults={"score": Decimal(score)},
                    )
                for days_ago, status in enumerate(reversed(pattern), start=1):
                    AttendanceRecord.objects.get_or_create(
                        enrollment=enrollment,
                        attendance_date=today - datetime.timedelta(days=days_ago),
                        defaults={"status": status},
                    )

        self.stdout.write(
            self.style.SUCCESS(
                f"Demo records ready: {Student.objects.count()} students, "
                f"{Enrollment.objects.count()} enrollments, {Grade.objects.count()} grades."
            )
        )
