import pytest
from django.contrib import admin
from django.test import RequestFactory

from hospital_core.accounts.admin import UserAdmin
from hospital_core.accounts.models import User


@pytest.fixture
def user_admin():
    return UserAdmin(User, admin.site)


def test_add_form_takes_id_and_role(user_admin):
    request = RequestFactory().get("/admin/accounts/user/add/")

    assert "id" not in user_admin.get_readonly_fields(request)
    form_class = user_admin.get_form(request)
    assert {"id", "role", "email", "full_name"} <= set(form_class.base_fields)


@pytest.mark.django_db
def test_change_form_locks_id_and_role(user_admin, patient_user):
    request = RequestFactory().get(f"/admin/accounts/user/{patient_user.id}/change/")

    readonly = user_admin.get_readonly_fields(request, obj=patient_user)
    assert {"id", "role", "created_at", "updated_at"} <= set(readonly)

    form_class = user_admin.get_form(request, obj=patient_user)
    assert "id" not in form_class.base_fields
    assert "role" not in form_class.base_fields
