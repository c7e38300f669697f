from decimal import Decimal
from rest_framework import serializers
from .models import CashSession
from .services import classify_difference


class CashSessionSerializer(serializers.ModelSerializer):
    """Cash session with its reconciliation outcome once closed."""

    result = serializers.SerializerMethodField()

    class Meta:
        model = CashSession
        fields = [
            'id',
            'start_date',
            'start_amount',
            'status',
            'end_date',
            'end_amount',
            'expected_amount',
            'difference',
            'result',
        ]
        read_only_fields = fields

    def get_result(self, obj):
        """surplus / shortfall / balanced, or None while open."""
        if obj.difference is None:
            return None
        return classify_difference(obj.difference).value


class StartDaySerializer(serializers.Serializer):
    start_amount = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal('0.00'))


class CloseDaySerializer(serializers.Serializer):
    counted_amount = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal('0.00'))


class CurrentReportSerializer(serializers.Serializer):
    session = CashSessionSerializer()
    start_amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    cash_sales = serializers.DecimalField(max_digits=12, decimal_places=2)
    card_sales = serializers.DecimalField(max_digits=12, decimal_places=2)
    total_sales = serializers.DecimalField(max_digits=12, decimal_places=2)
    total_expenses = serializers.DecimalField(max_digits=12, decimal_places=2)
    expected_cash = serializers.DecimalField(max_digits=12, decimal_places=2)
    currency = serializers.CharField()


class HistoryTotalsSerializer(serializers.Serializer):
    total_sales = serializers.DecimalField(max_digits=12, decimal_places=2)
    cash_sales = serializers.DecimalField(max_digits=12, decimal_places=2)
    card_sales = serializers.DecimalField(max_digits=12, decimal_places=2)
    order_count = serializers.IntegerField()


class SessionHistorySerializer(serializers.Serializer):
    sessions = CashSessionSerializer(many=True)
    totals = HistoryTotalsSerializer()
