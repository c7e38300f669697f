from rest_framework import serializers
from .models import Expense, ExpenseCategory, ExpenseType


class ExpenseSerializer(serializers.ModelSerializer):
    recorded_by_username = serializers.CharField(source='recorded_by.username', read_only=True, default=None)

    class Meta:
        model = Expense
        fields = [
            'id',
            'date',
            'description',
            'amount',
            'category',
            'type',
            'recorded_by',
            'recorded_by_username',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'recorded_by', 'created_at', 'updated_at']


class ExpenseFilterSerializer(serializers.Serializer):
    """Query parameter validation for expense listing."""

    category = serializers.ChoiceField(choices=ExpenseCategory.choices, required=False)
    type = serializers.ChoiceField(choices=ExpenseType.choices, required=False)
    date_from = serializers.DateField(required=False)
    date_to = serializers.DateField(required=False)

    def validate(self, attrs):
        date_from = attrs.get('date_from')
        date_to = attrs.get('date_to')
        if date_from and date_to and date_from > date_to:
            raise serializers.ValidationError({'date_to': 'date_to must be on or after date_from'})
        return attrs


class ExpenseTotalSerializer(serializers.Serializer):
    total = serializers.DecimalField(max_digits=12, decimal_places=2)
