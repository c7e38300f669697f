"""
Management command to create the default admin and ledger categories.

Usage:
    python manage.py seed_defaults
    python manage.py seed_defaults --admin-password 's3cret'

Safe to run repeatedly: existing records are left as they are.
"""

from decouple import config
from django.core.management.base import BaseCommand
from django.db import transaction

from apps.accounts.models import User, MemberRole, MemberStatus
from apps.ledger.models import TransactionCategory, EntryType


DEFAULT_CATEGORIES = [
    # Expenses
    ('Groceries', EntryType.EXPENSE, '🛒'),
    ('Housing', EntryType.EXPENSE, '🏡'),
    ('Transport', EntryType.EXPENSE, '🚗'),
    ('Utilities', EntryType.EXPENSE, '💡'),
    ('Entertainment', EntryType.EXPENSE, '🎬'),
    ('Health', EntryType.EXPENSE, '🩹'),
    ('Education', EntryType.EXPENSE, '🎓'),
    ('Other', EntryType.EXPENSE, '📦'),
    # Income
    ('Salary', EntryType.INCOME, '💼'),
    ('Bonus', EntryType.INCOME, '🎁'),
    ('Investments', EntryType.INCOME, '📈'),
    ('Other', EntryType.INCOME, '🪙'),
]


class Command(BaseCommand):
    help = 'Create the default admin account and ledger categories'

    def add_arguments(self, parser):
        parser.add_argument(
            '--admin-password',
            default=config('ADMIN_PASSWORD', default='admin123'),
            help='Password for a newly created Admin account (env: ADMIN_PASSWORD)',
        )
        parser.add_argument(
            '--admin-email',
            default=config('ADMIN_EMAIL', default='admin@example.com'),
        )

    @transaction.atomic
    def handle(self, *args, **options):
        self.create_admin(options['admin_email'], options['admin_password'])
        created = self.create_categories()

        self.stdout.write(self.style.SUCCESS(f'Defaults ready ({created} categories created).'))

    def create_admin(self, email, password):
        if User.objects.filter(username__iexact='Admin').exists():
            self.stdout.write('Admin account already exists')
            return

        User.objects.create_superuser(
            username='Admin',
            email=email,
            password=password,
            role=MemberRole.ADMIN,
            status=MemberStatus.APPROVED,
        )
        self.stdout.write(f'Created Admin account ({email})')

    def create_categories(self):
        created = 0
        for name, entry_type, icon in DEFAULT_CATEGORIES:
            _, was_created = TransactionCategory.objects.get_or_create(
                name=name,
                type=entry_type,
                defaults={'icon': icon},
            )
            created += was_created
        return created
