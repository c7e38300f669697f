import pytest
from decimal import Decimal
from django.urls import reverse
from rest_framework import status
from apps.sales.models import Order


@pytest.mark.django_db
class TestCheckoutEndpoint:
    """Tests for POST /api/sales/checkout/"""

    def test_checkout(self, member_client, member, espresso, soda):
        url = reverse('sales:checkout')
        data = {
            'items': [
                {'product': str(espresso.id), 'quantity': 2},
                {'product': str(soda.id), 'quantity': 1},
            ],
            'service_type': 'table',
            'payment_method': 'cash',
            'client_name': 'Table 4',
        }
        response = member_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['total'] == '80.00'
        assert len(response.data['items']) == 2
        assert Order.objects.get(id=response.data['id']).created_by == member

    def test_checkout_empty_cart(self, member_client, espresso):
        url = reverse('sales:checkout')
        data = {
            'items': [{'product': str(espresso.id), 'quantity': 0}],
            'service_type': 'table',
            'payment_method': 'cash',
        }
        response = member_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'empty' in response.data['error']

    def test_checkout_unknown_product(self, member_client, db):
        url = reverse('sales:checkout')
        data = {
            'items': [{'product': '00000000-0000-0000-0000-000000000000', 'quantity': 1}],
            'service_type': 'table',
            'payment_method': 'cash',
        }
        response = member_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_checkout_invalid_payment_method(self, member_client, espresso):
        url = reverse('sales:checkout')
        data = {
            'items': [{'product': str(espresso.id), 'quantity': 1}],
            'service_type': 'table',
            'payment_method': 'bitcoin',
        }
        response = member_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'payment_method' in response.data


@pytest.mark.django_db
class TestOrderEndpoints:
    """Tests for /api/sales/orders/ and /api/sales/totals/"""

    def test_list_filtered_by_day(self, member_client, march_orders):
        url = reverse('sales:order-list')
        response = member_client.get(url, {'date_from': '2026-03-06', 'date_to': '2026-03-06'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 1
        assert response.data['results'][0]['total'] == '200.00'

    def test_list_newest_first(self, member_client, march_orders):
        url = reverse('sales:order-list')
        response = member_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        totals = [order['total'] for order in response.data['results']]
        assert totals == ['200.00', '45.00', '80.50', '120.00']

    def test_list_filtered_by_payment_method(self, member_client, march_orders):
        url = reverse('sales:order-list')
        response = member_client.get(url, {'payment_method': 'card'})

        assert response.data['count'] == 1
        assert response.data['results'][0]['item_count'] == 1

    def test_order_detail(self, member_client, march_orders):
        order = march_orders[0]
        url = reverse('sales:order-detail', args=[order.id])
        response = member_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['items'][0]['product_name'] == 'Espresso'

    def test_totals(self, member_client, march_orders):
        url = reverse('sales:totals')
        response = member_client.get(url, {'date_from': '2026-03-05', 'date_to': '2026-03-05'})

        assert response.status_code == status.HTTP_200_OK
        assert Decimal(response.data['total_sales']) == Decimal('245.50')
        assert response.data['cash_sales'] == '165.00'

    def test_orders_require_authentication(self, api_client):
        url = reverse('sales:order-list')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
