from django.contrib import admin

from hospital_core.accounts.models import Doctor, Patient, User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ("id", "full_name", "email", "role", "phone", "created_at")
    list_filter = ("role",)
    search_fields = ("id", "full_name", "email", "phone")
    readonly_fields = ("created_at", "updated_at")
    ordering = ("-created_at",)

    def get_readonly_fields(self, request, obj=None):
        # id and role are set once, on the add form
        if obj is not None:
            return ("id", "role", *self.readonly_fields)
        return self.readonly_fields


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "blood_group", "emergency_contact", "created_at")
    search_fields = ("user__full_name", "user__email")
    readonly_fields = ("created_at", "updated_at")


@admin.register(Doctor)
class DoctorAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "specialization", "department", "license_number", "created_at")
    list_filter = ("department", "specialization")
    search_fields = ("user__full_name", "license_number")
    readonly_fields = ("created_at", "updated_at")
