# hospital_core/accounts/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from hospital_core.accounts.models import Doctor, Patient, User, UserRole


class UserNameSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["full_name"]
        read_only_fields = fields


class UserContactSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["id", "full_name", "email", "phone", "age"]
        read_only_fields = fields


class DoctorUserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["id", "full_name", "email"]
        read_only_fields = fields


class PatientNestedSerializer(serializers.ModelSerializer):
    user = UserContactSerializer(read_only=True)

    class Meta:
        model = Patient
        fields = ["id", "blood_group", "emergency_contact", "user"]
        read_only_fields = fields


class DoctorNestedSerializer(serializers.ModelSerializer):
    user = DoctorUserSerializer(read_only=True)

    class Meta:
        model = Doctor
        fields = ["id", "specialization", "license_number", "department", "user"]
        read_only_fields = fields


class PatientNameSerializer(serializers.ModelSerializer):
    user = UserNameSerializer(read_only=True)

    class Meta:
        model = Patient
        fields = ["user"]
        read_only_fields = fields


class DoctorNameSerializer(serializers.ModelSerializer):
    user = UserNameSerializer(read_only=True)

    class Meta:
        model = Doctor
        fields = ["user"]
        read_only_fields = fields


class DirectoryUserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["full_name", "email", "phone"]
        read_only_fields = fields


class DoctorDirectorySerializer(serializers.ModelSerializer):
    user = DirectoryUserSerializer(read_only=True)

    class Meta:
        model = Doctor
        fields = [
            "id",
            "user_id",
            "specialization",
            "license_number",
            "department",
            "experience_years",
            "user",
            "created_at",
        ]
        read_only_fields = fields


class UserProfileSerializer(serializers.ModelSerializer):
    patient = serializers.SerializerMethodField()
    doctor = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            "id",
            "email",
            "role",
            "full_name",
            "phone",
            "age",
            "patient",
            "doctor",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_patient(self, obj: User):
        if obj.role != UserRole.PATIENT or not hasattr(obj, "patient"):
            return None
        p = obj.patient
        return {"id": str(p.id), "blood_group": p.blood_group, "emergency_contact": p.emergency_contact}

    def get_doctor(self, obj: User):
        if obj.role != UserRole.DOCTOR or not hasattr(obj, "doctor"):
            return None
        d = obj.doctor
        return {
            "id": str(d.id),
            "specialization": d.specialization,
            "license_number": d.license_number,
            "department": d.department,
            "experience_years": d.experience_years,
        }


class UserRegisterSerializer(serializers.Serializer):
    id = serializers.CharField(max_length=128)
    email = serializers.EmailField()
    role = serializers.ChoiceField(choices=UserRole.choices)
    full_name = serializers.CharField(max_length=255)
    phone = serializers.CharField(max_length=32, required=False, allow_blank=True, default="")
    age = serializers.IntegerField(required=False, allow_null=True, min_value=0, max_value=150)

    # doctor-only
    specialization = serializers.CharField(max_length=128, required=False, allow_blank=True, default="")
    license_number = serializers.CharField(max_length=64, required=False, allow_blank=True, default="")
    department = serializers.CharField(max_length=128, required=False, allow_blank=True, default="")

    # patient-only
    blood_group = serializers.CharField(max_length=8, required=False, allow_blank=True, default="")
    emergency_contact = serializers.CharField(max_length=64, required=False, allow_blank=True, default="")


class PatientUserRefSerializer(serializers.Serializer):
    """
    Body carrying the patient's external user id as `patient_user_id`
    (`patient_id` accepted as an alias). validated_data holds `patient_user_id`.
    """
    patient_user_id = serializers.CharField(max_length=128, required=False)
    patient_id = serializers.CharField(max_length=128, required=False, write_only=True)

    def validate(self, attrs):
        alias = attrs.pop("patient_id", None)
        if not attrs.get("patient_user_id"):
            if not alias:
                raise serializers.ValidationError({"patient_user_id": "This field is required."})
            attrs["patient_user_id"] = alias
        return attrs
