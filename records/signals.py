"""Signals that audit cascading deletes of student records."""
from __future__ import annotations

import logging

from django.db.models.signals import pre_delete
from django.dispatch import receiver

from records.models import AttendanceRecord, Enrollment, Grade, Student

logger = logging.getLogger(__name__)


@receiver(pre_delete, sender=Student)
def log_student_cascade(sender, instance: Student, **kwargs):
    enrollments = Enrollment.objects.filter(student=instance)
    logger.info(
        "Deleting student %s (%s): cascading to %d enrollment(s), %d grade(s), %d attendance record(s)",
        instance.pk,
        instance.email,
        enrollments.count(),
        Grade.objects.filter(enrollment__in=enrollments).count(),
        AttendanceRecord.objects.filter(enrollment__in=enrollments).count(),
    )
