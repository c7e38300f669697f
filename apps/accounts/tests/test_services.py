"""
Service layer unit tests for accounts app.

Tests cover:
- Registration uniqueness rules
- Authentication of approved / pending members
- Member administration and the seed command
"""

import pytest
from uuid import uuid4

from django.core.management import call_command

from apps.accounts.models import User, MemberRole, MemberStatus
from apps.accounts.services import (
    register_member,
    authenticate_member,
    approve_member,
    delete_member,
    update_profile,
)
from apps.accounts.services.exceptions import (
    MemberRegistrationError,
    InvalidCredentialsError,
    PendingApprovalError,
    MemberNotFoundError,
    CannotDeleteSelfError,
)
from apps.ledger.models import TransactionCategory


@pytest.mark.django_db
class TestRegisterMember:

    def test_new_member_is_pending(self):
        user = register_member(username='lucia', email='lucia@example.com', password='SecurePass123!')

        assert user.status == MemberStatus.PENDING
        assert user.role == MemberRole.MEMBER
        assert user.check_password('SecurePass123!')

    def test_blank_telegram_id_stored_as_null(self):
        user = register_member(
            username='lucia', email='lucia@example.com', password='SecurePass123!', telegram_id=''
        )

        assert user.telegram_id is None

    def test_duplicate_email_case_insensitive(self, member):
        with pytest.raises(MemberRegistrationError, match='Email'):
            register_member(username='other', email='MARIA@example.com', password='SecurePass123!')


@pytest.mark.django_db
class TestAuthenticateMember:

    def test_sets_last_login(self, member):
        user = authenticate_member(username='maria', password='TestPass123!')

        assert user.last_login is not None

    def test_pending_member_rejected(self, pending_member):
        with pytest.raises(PendingApprovalError):
            authenticate_member(username='pedro', password='TestPass123!')

    def test_pending_member_wrong_password(self, pending_member):
        """Wrong credentials are reported before the approval state."""
        with pytest.raises(InvalidCredentialsError):
            authenticate_member(username='pedro', password='wrong')


@pytest.mark.django_db
class TestMemberManagement:

    def test_approve_member(self, pending_member):
        approve_member(member_id=pending_member.id)

        pending_member.refresh_from_db()
        assert pending_member.is_approved

    def test_approve_missing_member(self):
        with pytest.raises(MemberNotFoundError):
            approve_member(member_id=uuid4())

    def test_admin_cannot_delete_self(self, admin_member):
        with pytest.raises(CannotDeleteSelfError):
            delete_member(member_id=admin_member.id, deleted_by=admin_member)

    def test_update_profile_rejects_taken_username(self, member, admin_member):
        with pytest.raises(MemberRegistrationError):
            update_profile(user=member, username='admin')


@pytest.mark.django_db
class TestSeedDefaults:

    def test_creates_admin_and_categories(self):
        call_command('seed_defaults', admin_password='Secret123!')

        admin = User.objects.get(username='Admin')
        assert admin.is_admin
        assert admin.is_approved
        assert admin.check_password('Secret123!')
        assert TransactionCategory.objects.count() == 12

    def test_is_idempotent(self):
        call_command('seed_defaults')
        call_command('seed_defaults')

        assert User.objects.filter(username='Admin').count() == 1
        assert TransactionCategory.objects.count() == 12
