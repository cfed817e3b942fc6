# hospital_core/api/urls.py
from __future__ import annotations

from django.urls import re_path

from hospital_core.accounts.api.views import DoctorsView, UserDetailView, UsersView
from hospital_core.appointments.api.views import AppointmentCompleteView, AppointmentsView
from hospital_core.billing.api.views import BillsView
from hospital_core.pharmacy.api.views import MedicineDetailView, MedicinesView
from hospital_core.prescriptions.api.views import PrescriptionsView
from hospital_core.rooms.api.views import RoomDischargeView, RoomsView

# The dashboards call /api/medicines/<id> without a trailing slash. A 301 to the
# slashed URL would turn PUT/POST/DELETE into a GET, so every route takes both forms.
UUID_RE = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"

urlpatterns = [
    # Accounts
    re_path(r"^users/?$", UsersView.as_view(), name="users"),
    re_path(r"^users/(?P<user_id>[^/]+)/?$", UserDetailView.as_view(), name="user-detail"),
    re_path(r"^doctors/?$", DoctorsView.as_view(), name="doctors"),

    # Appointments
    re_path(r"^appointments/?$", AppointmentsView.as_view(), name="appointments"),
    re_path(
        rf"^appointments/(?P<appointment_id>{UUID_RE})/complete/?$",
        AppointmentCompleteView.as_view(),
        name="appointment-complete",
    ),

    # Prescriptions
    re_path(r"^prescriptions/?$", PrescriptionsView.as_view(), name="prescriptions"),

    # Pharmacy
    re_path(r"^medicines/?$", MedicinesView.as_view(), name="medicines"),
    re_path(rf"^medicines/(?P<medicine_id>{UUID_RE})/?$", MedicineDetailView.as_view(), name="medicine-detail"),

    # Rooms
    re_path(r"^rooms/?$", RoomsView.as_view(), name="rooms"),
    re_path(
        rf"^rooms/assignments/(?P<assignment_id>{UUID_RE})/discharge/?$",
        RoomDischargeView.as_view(),
        name="room-discharge",
    ),

    # Billing
    re_path(r"^billing/?$", BillsView.as_view(), name="billing"),
]
