"""
Management command to create the first shop administrator.

Usage:
    python manage.py create_admin --username owner --password secret --branch "Main Branch"
"""

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from apps.core.models import Branch, User


class Command(BaseCommand):
    """
    Create (or promote) an admin user, creating the named branch if needed.
    """

    help = "Create or promote a shop administrator"

    def add_arguments(self, parser):
        parser.add_argument("--username", required=True, help="Admin username")
        parser.add_argument("--password", required=True, help="Admin password")
        parser.add_argument("--email", default="", help="Admin email address")
        parser.add_argument("--branch", default="", help="Branch name to assign")

    @transaction.atomic
    def handle(self, *args, **options):
        username = options["username"].strip()
        password = options["password"]
        if not username:
            raise CommandError("Username cannot be empty")
        if not password:
            raise CommandError("Password cannot be empty")

        branch = None
        if options["branch"]:
            branch, branch_created = Branch.objects.get_or_create(name=options["branch"])
            if branch_created:
                self.stdout.write(self.style.SUCCESS(f"✓ Created branch {branch.name}"))

        user, created = User.objects.get_or_create(
            username=username, defaults={"email": options["email"]}
        )
        user.role = User.Role.ADMIN
        user.is_active = True
        user.is_staff = True
        if branch is not None:
            user.branch = branch
        if options["email"]:
            user.email = options["email"]
        user.set_password(password)
        user.save()

        if created:
            self.stdout.write(self.style.SUCCESS(f"✓ Created admin user {username}"))
        else:
            self.stdout.write(self.style.WARNING(f"User {username} already existed; promoted to admin"))
