from rest_framework import serializers
from apps.catalog.models import Product
from .models import Order, OrderItem, ServiceType, PaymentMethod


class OrderItemSerializer(serializers.ModelSerializer):
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = OrderItem
        fields = ['id', 'product', 'product_name', 'price', 'quantity', 'subtotal']
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    """Order with its lines."""

    items = OrderItemSerializer(many=True, read_only=True)

    class Meta:
        model = Order
        fields = [
            'id',
            'date',
            'total',
            'client_name',
            'service_type',
            'payment_method',
            'created_by',
            'items',
        ]
        read_only_fields = fields


class OrderListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for order listings."""

    item_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = Order
        fields = ['id', 'date', 'total', 'client_name', 'service_type', 'payment_method', 'item_count']
        read_only_fields = fields


class CartItemSerializer(serializers.Serializer):
    """One cart entry. Quantities <= 0 are accepted and dropped at checkout."""

    product = serializers.PrimaryKeyRelatedField(queryset=Product.objects.all())
    quantity = serializers.IntegerField()


class CheckoutSerializer(serializers.Serializer):
    """Input serializer for POST /api/sales/checkout/."""

    items = CartItemSerializer(many=True)
    service_type = serializers.ChoiceField(choices=ServiceType.choices)
    payment_method = serializers.ChoiceField(choices=PaymentMethod.choices)
    client_name = serializers.CharField(max_length=200, required=False, allow_blank=True, default='')


# =============================================================================
# Query / response serializers
# =============================================================================

class DateRangeSerializer(serializers.Serializer):
    """Inclusive calendar-day range query parameters."""

    date_from = serializers.DateField(required=False)
    date_to = serializers.DateField(required=False)

    def validate(self, attrs):
        date_from = attrs.get('date_from')
        date_to = attrs.get('date_to')
        if date_from and date_to and date_from > date_to:
            raise serializers.ValidationError({'date_to': 'date_to must be on or after date_from'})
        return attrs


class OrderFilterSerializer(DateRangeSerializer):
    payment_method = serializers.ChoiceField(choices=PaymentMethod.choices, required=False)
    service_type = serializers.ChoiceField(choices=ServiceType.choices, required=False)


class SalesTotalsSerializer(serializers.Serializer):
    total_sales = serializers.DecimalField(max_digits=12, decimal_places=2)
    cash_sales = serializers.DecimalField(max_digits=12, decimal_places=2)
    card_sales = serializers.DecimalField(max_digits=12, decimal_places=2)
    order_count = serializers.IntegerField()
