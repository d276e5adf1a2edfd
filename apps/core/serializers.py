"""
Serializers for core models and authentication.
"""

from django.contrib.auth.password_validation import validate_password

from rest_framework import serializers

from apps.core.exceptions import Conflict

from .models import Branch, ShopProfile, User


class UniqueConflictMixin:
    """
    Report duplicate values of ``unique_conflict_fields`` as 409 Conflict.

    DRF's own UniqueValidator would return a 400; the matching ``extra_kwargs``
    entries must clear it with ``{"validators": []}``.
    """

    unique_conflict_fields = ()

    def validate(self, attrs):
        attrs = super().validate(attrs)
        model = self.Meta.model
        for field_name in self.unique_conflict_fields:
            value = attrs.get(field_name)
            if value in (None, ""):
                continue
            queryset = model.objects.filter(**{field_name: value})
            if self.instance is not None:
                queryset = queryset.exclude(pk=self.instance.pk)
            if queryset.exists():
                label = model._meta.verbose_name.title()
                raise Conflict(f"{label} with {field_name} '{value}' already exists")
        return attrs


def blank_to_none(value):
    """Store empty optional unique values as NULL."""
    return value or None


class BranchSerializer(serializers.ModelSerializer):
    class Meta:
        model = Branch
        fields = [
            "id",
            "name",
            "name_ur",
            "address",
            "address_ur",
            "phone",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]


class UserSerializer(serializers.ModelSerializer):
    """User detail and update; the password is write-only and optional."""

    branch_name = serializers.CharField(source="branch.name", read_only=True, default=None)
    password = serializers.CharField(write_only=True, required=False, min_length=8)

    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "first_name",
            "last_name",
            "email",
            "phone",
            "role",
            "branch",
            "branch_name",
            "is_active",
            "last_login",
            "date_joined",
            "password",
        ]
        read_only_fields = ["id", "last_login", "date_joined"]

    def validate_password(self, value):
        validate_password(value)
        return value

    def create(self, validated_data):
        password = validated_data.pop("password", None)
        user = User(**validated_data)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save()
        return user

    def update(self, instance, validated_data):
        password = validated_data.pop("password", None)
        instance = super().update(instance, validated_data)
        if password:
            instance.set_password(password)
            instance.save(update_fields=["password"])
        return instance


class RegisterSerializer(UserSerializer):
    """User creation by an administrator; a password is required."""

    password = serializers.CharField(write_only=True, min_length=8)


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)


class ShopProfileSerializer(serializers.ModelSerializer):
    class Meta:
        model = ShopProfile
        fields = [
            "shop_name",
            "shop_name_ur",
            "owner_name",
            "ntn",
            "strn",
            "cnic",
            "phone1",
            "phone2",
            "address",
            "address_ur",
            "fbr_pos_id",
            "logo_url",
            "updated_at",
        ]
        read_only_fields = ["updated_at"]
