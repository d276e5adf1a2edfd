"""
Core models for the retail shop manager.

Branches, staff users with roles, and the singleton shop profile printed on
receipts.
"""

import uuid

from django.contrib.auth.models import AbstractUser
from django.db import models


class Branch(models.Model):
    """
    A physical shop location.

    Sales, purchases, adjustments and expenses are recorded against a branch.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the branch",
    )

    name = models.CharField(max_length=255, help_text="Branch name")

    name_ur = models.CharField(max_length=255, blank=True, help_text="Branch name in Urdu")

    address = models.TextField(blank=True, help_text="Branch address")

    address_ur = models.TextField(blank=True, help_text="Branch address in Urdu")

    phone = models.CharField(max_length=20, blank=True, help_text="Branch phone number")

    is_active = models.BooleanField(default=True, help_text="Whether the branch is active")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "branches"
        ordering = ["name"]
        verbose_name = "Branch"
        verbose_name_plural = "Branches"
        indexes = [
            models.Index(fields=["is_active"], name="branch_active_idx"),
        ]

    def __str__(self):
        return self.name


class User(AbstractUser):
    """
    Staff member with a single role.

    Roles gate what a user may do: admins manage everything, managers run a
    branch, cashiers ring up sales and stock keepers handle inventory.
    """

    class Role(models.TextChoices):
        ADMIN = "admin", "Administrator"
        MANAGER = "manager", "Manager"
        CASHIER = "cashier", "Cashier"
        STOCK_KEEPER = "stock_keeper", "Stock Keeper"

    role = models.CharField(
        max_length=20,
        choices=Role.choices,
        default=Role.CASHIER,
        help_text="User's role in the shop",
    )

    branch = models.ForeignKey(
        Branch,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="users",
        help_text="Branch that this user is assigned to",
    )

    phone = models.CharField(max_length=20, blank=True, help_text="User's phone number")

    class Meta:
        db_table = "users"
        ordering = ["username"]
        verbose_name = "User"
        verbose_name_plural = "Users"
        indexes = [
            models.Index(fields=["role"], name="user_role_idx"),
            models.Index(fields=["branch"], name="user_branch_idx"),
        ]

    def __str__(self):
        return f"{self.username} ({self.get_role_display()})"

    def has_role(self, *roles):
        """Check if user holds one of the given roles."""
        return self.role in roles


class ShopProfile(models.Model):
    """
    Shop identity and tax registration shown on receipts.

    There is exactly one row; use ``ShopProfile.load()`` to fetch it.
    """

    SINGLETON_ID = 1

    id = models.PositiveSmallIntegerField(primary_key=True, default=SINGLETON_ID, editable=False)

    shop_name = models.CharField(max_length=255, default="My Shop", help_text="Shop name")
    shop_name_ur = models.CharField(max_length=255, blank=True, help_text="Shop name in Urdu")
    owner_name = models.CharField(max_length=255, blank=True)

    ntn = models.CharField(max_length=50, blank=True, help_text="National Tax Number")
    strn = models.CharField(max_length=50, blank=True, help_text="Sales Tax Registration Number")
    cnic = models.CharField(max_length=20, blank=True, help_text="Owner CNIC")

    phone1 = models.CharField(max_length=20, blank=True)
    phone2 = models.CharField(max_length=20, blank=True)

    address = models.TextField(blank=True)
    address_ur = models.TextField(blank=True)

    fbr_pos_id = models.CharField(
        max_length=50, blank=True, help_text="FBR point-of-sale registration id"
    )
    logo_url = models.URLField(blank=True)

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "shop_profile"
        verbose_name = "Shop Profile"
        verbose_name_plural = "Shop Profile"

    def __str__(self):
        return self.shop_name

    def save(self, *args, **kwargs):
        """Always write the singleton row."""
        self.id = self.SINGLETON_ID
        super().save(*args, **kwargs)

    @classmethod
    def load(cls):
        """Return the shop profile, creating the default row on first use."""
        profile, _ = cls.objects.get_or_create(id=cls.SINGLETON_ID)
        return profile


class PaymentMethod(models.TextChoices):
    """Payment methods accepted across sales and purchases."""

    CASH = "cash", "Cash"
    CARD = "card", "Card"
    JAZZCASH = "jazzcash", "JazzCash"
    EASYPAISA = "easypaisa", "Easypaisa"
    BANK_TRANSFER = "bank_transfer", "Bank Transfer"
    CHEQUE = "cheque", "Cheque"
    CREDIT = "credit", "Credit"
    MIXED = "mixed", "Mixed"

    @classmethod
    def for_sales(cls):
        return [cls.CASH, cls.CARD, cls.JAZZCASH, cls.EASYPAISA, cls.BANK_TRANSFER, cls.CREDIT, cls.MIXED]

    @classmethod
    def for_purchases(cls):
        return [cls.CASH, cls.BANK_TRANSFER, cls.JAZZCASH, cls.EASYPAISA, cls.CHEQUE, cls.CREDIT]
