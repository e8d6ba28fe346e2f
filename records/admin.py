"""Admin configuration for the student records domain."""
from django.contrib import admin

from .grading import student_gpa
from .models import AttendanceRecord, Course, Enrollment, Grade, Student


class EnrollmentInline(admin.TabularInline):
    model = Enrollment
    extra = 0
    fields = ("course", "enrollment_date")
    verbose_name = "enrollment"
    verbose_name_plural = "enrollments"


class GradeInline(admin.TabularInline):
    model = Grade
    extra = 0
    fields = ("assessment_type", "score", "graded_at")


class AttendanceRecordInline(admin.TabularInline):
    model = AttendanceRecord
    extra = 0
    fields = ("attendance_date", "status", "notes")


@admin.register(Student)
class StudentAdmin(admin.ModelAdmin):
    list_display = ("last_name", "first_name", "email", "date_of_birth", "get_gpa")
    search_fields = ("first_name", "last_name", "email")
    inlines = [EnrollmentInline]

    @admin.display(description="GPA")
    def get_gpa(self, obj):
        return student_gpa(obj.pk)


@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    list_display = ("name", "credits", "instructor")
    search_fields = ("name", "instructor")


@admin.register(Enrollment)
class EnrollmentAdmin(admin.ModelAdmin):
    list_display = ("student", "course", "enrollment_date")
    list_filter = ("course",)
    search_fields = ("student__first_name", "student__last_name", "student__email", "course__name")
    inlines = [GradeInline, AttendanceRecordInline]


@admin.register(Grade)
class GradeAdmin(admin.ModelAdmin):
    list_display = ("enrollment", "assessment_type", "score", "graded_at")
    list_filter = ("assessment_type", "enrollment__course")
    search_fields = ("enrollment__student__last_name", "enrollment__course__name")


@admin.register(AttendanceRecord)
class AttendanceRecordAdmin(admin.ModelAdmin):
    list_display = ("enrollment", "attendance_date", "status")
    list_filter = ("status", "attendance_date")
    search_fields = ("enrollment__student__last_name", "enrollment__course__name")
