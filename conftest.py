"""Fixtures shared by every app: API clients, members and products."""

import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, MemberRole, MemberStatus
from apps.catalog.models import Product, ProductCategory


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def member(db):
    """Create and return an approved member."""
    return User.objects.create_user(
        username='maria',
        email='maria@example.com',
        password='TestPass123!',
        status=MemberStatus.APPROVED,
    )


@pytest.fixture
def pending_member(db):
    """Create and return a member awaiting approval."""
    return User.objects.create_user(
        username='pedro',
        email='pedro@example.com',
        password='TestPass123!',
    )


@pytest.fixture
def admin_member(db):
    """Create and return an approved admin."""
    return User.objects.create_user(
        username='Admin',
        email='admin@example.com',
        password='TestPass123!',
        role=MemberRole.ADMIN,
        status=MemberStatus.APPROVED,
    )


@pytest.fixture
def member_client(api_client, member):
    """Return API client authenticated as an approved member."""
    refresh = RefreshToken.for_user(member)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def admin_client(api_client, admin_member):
    """Return API client authenticated as admin."""
    refresh = RefreshToken.for_user(admin_member)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def espresso(db):
    """Cafeteria product (not available as a coworking extra)."""
    return Product.objects.create(
        name='Espresso',
        price=Decimal('30.00'),
        cost=Decimal('8.00'),
        stock=100,
        category=ProductCategory.CAFETERIA,
    )


@pytest.fixture
def soda(db):
    """Fridge product."""
    return Product.objects.create(
        name='Soda',
        price=Decimal('20.00'),
        cost=Decimal('11.50'),
        stock=24,
        category=ProductCategory.FRIDGE,
    )


@pytest.fixture
def sandwich(db):
    """Food product."""
    return Product.objects.create(
        name='Sandwich',
        price=Decimal('65.00'),
        cost=Decimal('30.00'),
        stock=10,
        category=ProductCategory.FOOD,
    )
