from decimal import Decimal

from django.test import SimpleTestCase, TestCase

from records.grading import grade_points, grade_points_expression, student_gpa
from records.models import Grade

from .helpers import add_grade, enroll, make_course, make_student


class GradePointsTests(SimpleTestCase):
    def test_threshold_boundaries(self):
        cases = [
            (100, "4.0"),
            (75, "4.0"),
            (Decimal("74.99"), "3.7"),
            (70, "3.7"),
            (Decimal("69.99"), "3.0"),
            (65, "3.0"),
            (Decimal("64.99"), "2.7"),
            (60, "2.7"),
            (Decimal("59.99"), "2.0"),
            (50, "2.0"),
            (Decimal("49.99"), "0.0"),
            (0, "0.0"),
        ]
        for score, expected in cases:
            with self.subTest(score=score):
                self.assertEqual(grade_points(score), Decimal(expected))

    def test_accepts_float_and_string_scores(self):
        self.assertEqual(grade_points(74.99), Decimal("3.7"))
        self.assertEqual(grade_points("75"), Decimal("4.0"))
        self.assertEqual(grade_points(75), 4.0)

    def test_monotonic_over_score_range(self):
        previous = grade_points(0)
        score = Decimal("0")
        while score <= 100:
            current = grade_points(score)
            self.assertGreaterEqual(current, previous, msg=f"drop at {score}")
            previous = current
            score += Decimal("0.25")

    def test_out_of_range_scores_are_not_rejected(self):
        self.assertEqual(grade_points(-5), Decimal("0.0"))
        self.assertEqual(grade_points(120), Decimal("4.0"))


class GradePointsExpressionTests(TestCase):
    def test_database_expression_matches_python_mapping(self):
        enrollment = enroll(make_student(), make_course())
        for score in ["100", "75", "74.99", "70", "65.5", "60", "59.99", "50", "49.99", "0"]:
            add_grade(enrollment, score)

        for grade in Grade.objects.annotate(points=grade_points_expression()):
            with self.subTest(score=grade.score):
                self.assertEqual(grade.points, grade_points(grade.score))


class StudentGpaTests(TestCase):
    def test_student_without_grades_has_zero_gpa(self):
        student = make_student()
        enroll(student, make_course())

        gpa = student_gpa(student.pk)

        self.assertEqual(gpa, Decimal("0.00"))
        self.assertEqual(str(gpa), "0.00")

    def test_unknown_student_has_zero_gpa(self):
        self.assertEqual(student_gpa(987654), Decimal("0.00"))

    def test_single_graded_course(self):
        student = make_student()
        add_grade(enroll(student, make_course(credits=3)), 80)

        self.assertEqual(student_gpa(student.pk), Decimal("4.00"))

    def test_credit_weighted_across_courses(self):
        student = make_student()
        add_grade(enroll(student, make_course(credits=3)), 72)
        add_grade(enroll(student, make_course(credits=4)), 55)

        # (3.7 * 3 + 2.0 * 4) / (3 + 4) = 2.728...
        self.assertEqual(student_gpa(student.pk), Decimal("2.73"))

    def test_credits_are_counted_once_per_grade_row(self):
        student = make_student()
        first = enroll(student, make_course(credits=3))
        add_grade(first, 80, "Midterm")
        add_grade(first, 40, "Final")
        add_grade(enroll(student, make_course(credits=4)), 72)

        # (4.0 * 3 + 0.0 * 3 + 3.7 * 4) / (3 + 3 + 4) = 2.68
        self.assertEqual(student_gpa(student.pk), Decimal("2.68"))

    def test_ungraded_enrollments_do_not_dilute_gpa(self):
        student = make_student()
        add_grade(enroll(student, make_course(credits=3)), 66)
        enroll(student, make_course(credits=4))

        self.assertEqual(student_gpa(student.pk), Decimal("3.00"))

    def test_other_students_grades_are_ignored(self):
        student = make_student()
        other = make_student()
        course = make_course(credits=3)
        add_grade(enroll(student, course), 61)
        add_grade(enroll(other, course), 30)

        self.assertEqual(student_gpa(student.pk), Decimal("2.70"))
        self.assertEqual(student_gpa(other.pk), Decimal("0.00"))
