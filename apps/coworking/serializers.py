from rest_framework import serializers
from apps.sales.models import PaymentMethod
from .models import CoworkingSession, ConsumedExtra, CoworkingStatus


class ConsumedExtraSerializer(serializers.ModelSerializer):
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = ConsumedExtra
        fields = ['id', 'product', 'product_name', 'unit_price', 'quantity', 'subtotal', 'added_at']
        read_only_fields = fields


class CoworkingSessionSerializer(serializers.ModelSerializer):
    """Session with its consumed extras."""

    extras = ConsumedExtraSerializer(many=True, read_only=True)

    class Meta:
        model = CoworkingSession
        fields = [
            'id',
            'client_name',
            'start_time',
            'end_time',
            'status',
            'total',
            'order',
            'extras',
        ]
        read_only_fields = fields


class StartSessionSerializer(serializers.Serializer):
    client_name = serializers.CharField(max_length=200, required=False, allow_blank=True, default='')


class AddExtraSerializer(serializers.Serializer):
    product = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1, default=1)


class RemoveExtraSerializer(serializers.Serializer):
    """Omit quantity to remove the whole line."""

    quantity = serializers.IntegerField(min_value=1, required=False)


class FinishSessionSerializer(serializers.Serializer):
    payment_method = serializers.ChoiceField(choices=PaymentMethod.choices)


class SessionFilterSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=CoworkingStatus.choices, required=False)


class BillSerializer(serializers.Serializer):
    minutes = serializers.IntegerField()
    time_cost = serializers.DecimalField(max_digits=12, decimal_places=2)
    extras_cost = serializers.DecimalField(max_digits=12, decimal_places=2)
    total = serializers.DecimalField(max_digits=12, decimal_places=2)
    currency = serializers.CharField()
