"""Grade-point mapping and credit-weighted GPA calculation."""
from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal

from django.db.models import Case, Count, DecimalField, ExpressionWrapper, F, Sum, Value, When

from .models import Grade

logger = logging.getLogger(__name__)

# (minimum score, grade points), checked top-down; first match wins.
GRADE_POINT_SCALE = (
    (Decimal("75"), Decimal("4.0")),
    (Decimal("70"), Decimal("3.7")),
    (Decimal("65"), Decimal("3.0")),
    (Decimal("60"), Decimal("2.7")),
    (Decimal("50"), Decimal("2.0")),
)
FAILING_GRADE_POINTS = Decimal("0.0")

TWO_PLACES = Decimal("0.01")
ONE_PLACE = Decimal("0.1")
ZERO_GPA = Decimal("0.00")


def grade_points(score) -> Decimal:
    """Map a 0-100 score onto the 4.0 grade-point scale.

    The input range is not validated here; the Grade model's check
    constraint keeps stored scores within [0, 100].
    """
    value = score if isinstance(score, Decimal) else Decimal(str(score))
    for threshold, points in GRADE_POINT_SCALE:
        if value >= threshold:
            return points
    return FAILING_GRADE_POINTS


def grade_points_expression(score_field: str = "score") -> Case:
    """Database-side equivalent of :func:`grade_points` for ``score_field``."""
    points_field = DecimalField(max_digits=3, decimal_places=1)
    return Case(
        *[
            When(**{f"{score_field}__gte": threshold}, then=Value(points, output_field=points_field))
            for threshold, points in GRADE_POINT_SCALE
        ],
        default=Value(FAILING_GRADE_POINTS, output_field=points_field),
        output_field=points_field,
    )


def quality_points_expression() -> ExpressionWrapper:
    """Grade points of a Grade row weighted by its course's credits."""
    return ExpressionWrapper(
        grade_points_expression("score") * F("enrollment__course__credits"),
        output_field=DecimalField(max_digits=12, decimal_places=2),
    )


def compute_gpa(total_points, total_credits) -> Decimal:
    if not total_credits:
        return ZERO_GPA
    gpa = Decimal(total_points) / Decimal(total_credits)
    return gpa.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def student_gpa(student_id) -> Decimal:
    """Credit-weighted GPA over every grade recorded for the student.

    Credits are summed once per grade row, so a course graded on several
    assessments weighs that many times in both numerator and denominator.
    Students without grades (or unknown ids) get ``0.00``.
    """
    totals = Grade.objects.filter(enrollment__student_id=student_id).aggregate(
        total_points=Sum(quality_points_expression()),
        total_credits=Sum("enrollment__course__credits"),
    )
    gpa = compute_gpa(totals["total_points"], totals["total_credits"])
    logger.debug("GPA for student %s: %s (credits=%s)", student_id, gpa, totals["total_credits"])
    return gpa


def grade_totals_by_student() -> dict:
    """Per-student grade aggregates keyed by student id.

    Each value holds ``gpa`` and ``overall_avg_score``; students without
    grades are absent from the mapping.
    """
    rows = (
        Grade.objects.order_by()
        .values("enrollment__student_id")
        .annotate(
            total_points=Sum(quality_points_expression()),
            total_credits=Sum("enrollment__course__credits"),
            score_sum=Sum("score"),
            grade_count=Count("pk"),
        )
    )
    totals = {}
    for row in rows:
        average = (Decimal(row["score_sum"]) / row["grade_count"]).quantize(ONE_PLACE, rounding=ROUND_HALF_UP)
        totals[row["enrollment__student_id"]] = {
            "gpa": compute_gpa(row["total_points"], row["total_credits"]),
            "overall_avg_score": average,
        }
    return totals
