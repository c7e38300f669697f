import pytest
from decimal import Decimal
from django.urls import reverse
from rest_framework import status
from apps.ledger.models import Transaction, EntryType


@pytest.mark.django_db
class TestTransactionEndpoints:
    """Tests for /api/ledger/transactions/"""

    def test_create_transaction(self, member_client, member, groceries_category):
        url = reverse('ledger:transaction-list')
        data = {
            'date': '2026-03-10',
            'description': 'Weekly groceries',
            'amount': '85.20',
            'type': EntryType.EXPENSE,
            'category': str(groceries_category.id),
        }
        response = member_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        entry = Transaction.objects.get(id=response.data['id'])
        assert entry.member == member
        assert entry.amount == Decimal('85.20')

    def test_create_transaction_type_mismatch(self, member_client, salary_category):
        url = reverse('ledger:transaction-list')
        data = {
            'date': '2026-03-10',
            'description': 'Oops',
            'amount': '10.00',
            'type': EntryType.EXPENSE,
            'category': str(salary_category.id),
        }
        response = member_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_rejects_zero_amount(self, member_client, groceries_category):
        url = reverse('ledger:transaction-list')
        data = {
            'date': '2026-03-10',
            'description': 'Nothing',
            'amount': '0.00',
            'type': EntryType.EXPENSE,
            'category': str(groceries_category.id),
        }
        response = member_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_list_filtered_by_date_range(self, member_client, march_entries):
        url = reverse('ledger:transaction-list')
        response = member_client.get(url, {'date_from': '2026-04-01', 'date_to': '2026-04-30'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 1
        assert response.data['results'][0]['description'] == 'April groceries'

    def test_list_invalid_date_range(self, member_client, march_entries):
        url = reverse('ledger:transaction-list')
        response = member_client.get(url, {'date_from': '2026-04-30', 'date_to': '2026-04-01'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_transaction(self, member_client, march_entries):
        entry = march_entries[1]
        url = reverse('ledger:transaction-detail', args=[entry.id])
        response = member_client.patch(url, {'amount': '190.00'})

        assert response.status_code == status.HTTP_200_OK
        entry.refresh_from_db()
        assert entry.amount == Decimal('190.00')

    def test_delete_transaction(self, member_client, march_entries):
        entry = march_entries[0]
        url = reverse('ledger:transaction-detail', args=[entry.id])
        response = member_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Transaction.objects.filter(id=entry.id).exists()

    def test_pending_member_forbidden(self, api_client, pending_member):
        api_client.force_authenticate(user=pending_member)
        url = reverse('ledger:transaction-list')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN


@pytest.mark.django_db
class TestCategoryEndpoints:
    """Tests for /api/ledger/categories/"""

    def test_delete_category_in_use_conflicts(self, member_client, march_entries, transport_category):
        url = reverse('ledger:category-detail', args=[transport_category.id])
        response = member_client.delete(url)

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_list_filtered_by_type(self, member_client, salary_category, groceries_category):
        url = reverse('ledger:category-list')
        response = member_client.get(url, {'type': 'income'})

        assert response.status_code == status.HTTP_200_OK
        assert [c['name'] for c in response.data] == ['Salary']


@pytest.mark.django_db
class TestBudgetEndpoints:
    """Tests for /api/ledger/budgets/ and /api/ledger/summary/"""

    def test_set_budget(self, member_client, groceries_category):
        url = reverse('ledger:budgets')
        response = member_client.put(
            url, {'category': str(groceries_category.id), 'amount': '250.00'}, format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['amount'] == '250.00'

    def test_clear_budget(self, member_client, groceries_budget, groceries_category):
        url = reverse('ledger:budgets')
        response = member_client.put(
            url, {'category': str(groceries_category.id), 'amount': '0'}, format='json'
        )

        assert response.status_code == status.HTTP_204_NO_CONTENT

    def test_budget_status(self, member_client, march_entries, groceries_budget):
        url = reverse('ledger:budget-status')
        response = member_client.get(url, {'year': 2026, 'month': 3})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['total_spent'] == '375.50'

    def test_summary(self, member_client, march_entries):
        url = reverse('ledger:summary')
        response = member_client.get(url, {'year': 2026, 'month': 3})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['net_savings'] == '2124.50'

    def test_summary_invalid_month(self, member_client):
        url = reverse('ledger:summary')
        response = member_client.get(url, {'year': 2026, 'month': 13})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
