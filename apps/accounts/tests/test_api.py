import pytest
from django.urls import reverse
from rest_framework import status
from apps.accounts.models import User, MemberStatus


# =============================================================================
# Registration Tests
# =============================================================================

@pytest.mark.django_db
class TestRegistration:
    """Tests for POST /api/auth/register/"""

    def test_register_success(self, api_client):
        """New members are created pending approval."""
        url = reverse('users:register')
        data = {
            'username': 'lucia',
            'email': 'lucia@example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['user']['status'] == MemberStatus.PENDING
        assert User.objects.filter(username='lucia').exists()

    def test_register_duplicate_username_case_insensitive(self, api_client, member):
        """Usernames are unique regardless of case."""
        url = reverse('users:register')
        data = {
            'username': member.username.upper(),
            'email': 'other@example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'Username' in response.data['error']

    def test_register_duplicate_email(self, api_client, member):
        """Emails are unique."""
        url = reverse('users:register')
        data = {
            'username': 'someone',
            'email': member.email,
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_register_password_mismatch(self, api_client):
        """Registration fails when passwords don't match."""
        url = reverse('users:register')
        data = {
            'username': 'mismatch',
            'email': 'mismatch@example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'DifferentPass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'password_confirm' in response.data


# =============================================================================
# Login Tests
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login/"""

    def test_login_success(self, api_client, member):
        """Approved members receive JWT tokens."""
        url = reverse('users:login')
        response = api_client.post(url, {'username': 'MARIA', 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data['tokens']
        assert 'refresh' in response.data['tokens']

    def test_login_wrong_password(self, api_client, member):
        """Wrong password is rejected."""
        url = reverse('users:login')
        response = api_client.post(url, {'username': 'maria', 'password': 'nope'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_unknown_user(self, api_client, db):
        """Unknown username is rejected with the same message."""
        url = reverse('users:login')
        response = api_client.post(url, {'username': 'ghost', 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_pending_member(self, api_client, pending_member):
        """Members awaiting approval cannot log in."""
        url = reverse('users:login')
        response = api_client.post(url, {'username': 'pedro', 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert 'pending' in response.data['error']


# =============================================================================
# Profile Tests
# =============================================================================

@pytest.mark.django_db
class TestProfile:
    """Tests for /api/auth/user/ endpoints."""

    def test_get_current_user(self, member_client, member):
        url = reverse('users:current-user')
        response = member_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['username'] == member.username

    def test_update_profile(self, member_client, member):
        url = reverse('users:update-profile')
        response = member_client.patch(url, {'telegram_id': '12345'})

        assert response.status_code == status.HTTP_200_OK
        member.refresh_from_db()
        assert member.telegram_id == '12345'

    def test_update_profile_taken_email(self, member_client, admin_member):
        url = reverse('users:update-profile')
        response = member_client.patch(url, {'email': admin_member.email})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_profile_unauthenticated(self, api_client):
        url = reverse('users:current-user')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Member Administration Tests
# =============================================================================

@pytest.mark.django_db
class TestMemberAdministration:
    """Tests for /api/auth/members/ endpoints."""

    def test_admin_lists_pending_members(self, admin_client, pending_member, member):
        url = reverse('users:member-list')
        response = admin_client.get(url, {'status': 'pending'})

        assert response.status_code == status.HTTP_200_OK
        usernames = [m['username'] for m in response.data]
        assert usernames == ['pedro']

    def test_admin_approves_member(self, admin_client, pending_member):
        url = reverse('users:member-approve', args=[pending_member.id])
        response = admin_client.post(url)

        assert response.status_code == status.HTTP_200_OK
        pending_member.refresh_from_db()
        assert pending_member.status == MemberStatus.APPROVED

    def test_member_cannot_approve(self, member_client, pending_member):
        url = reverse('users:member-approve', args=[pending_member.id])
        response = member_client.post(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_admin_deletes_member(self, admin_client, member):
        url = reverse('users:member-delete', args=[member.id])
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not User.objects.filter(id=member.id).exists()

    def test_admin_cannot_delete_self(self, admin_client, admin_member):
        url = reverse('users:member-delete', args=[admin_member.id])
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert User.objects.filter(id=admin_member.id).exists()


# =============================================================================
# Health Check Tests
# =============================================================================

@pytest.mark.django_db
class TestHealthCheck:

    def test_plain_http_request_is_served(self, api_client, settings):
        response = api_client.get(reverse('health-check'))

        assert settings.SECURE_SSL_REDIRECT is False
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {'status': 'ok', 'database': 'ok'}
