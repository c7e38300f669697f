from rest_framework import serializers
from .models import TransactionCategory, Transaction, Budget, EntryType


class TransactionCategorySerializer(serializers.ModelSerializer):
    """Category serializer."""

    class Meta:
        model = TransactionCategory
        fields = ['id', 'name', 'type', 'icon', 'created_at']
        read_only_fields = ['id', 'created_at']


class TransactionSerializer(serializers.ModelSerializer):
    """Transaction serializer; the member is always the caller."""

    member_username = serializers.CharField(source='member.username', read_only=True)
    category_name = serializers.CharField(source='category.name', read_only=True)

    class Meta:
        model = Transaction
        fields = [
            'id',
            'date',
            'description',
            'amount',
            'type',
            'category',
            'category_name',
            'member',
            'member_username',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'member', 'created_at', 'updated_at']


class BudgetSerializer(serializers.ModelSerializer):
    """Budget output serializer."""

    category_name = serializers.CharField(source='category.name', read_only=True)

    class Meta:
        model = Budget
        fields = ['id', 'category', 'category_name', 'amount', 'updated_at']
        read_only_fields = fields


class SetBudgetSerializer(serializers.Serializer):
    """Input serializer for PUT /api/ledger/budgets/."""

    category = serializers.UUIDField()
    amount = serializers.DecimalField(max_digits=10, decimal_places=2)


# =============================================================================
# Query / response serializers
# =============================================================================

class TransactionFilterSerializer(serializers.Serializer):
    """Query parameter validation for transaction listing."""

    type = serializers.ChoiceField(choices=EntryType.choices, required=False)
    category = serializers.UUIDField(required=False)
    date_from = serializers.DateField(required=False)
    date_to = serializers.DateField(required=False)

    def validate(self, attrs):
        date_from = attrs.get('date_from')
        date_to = attrs.get('date_to')
        if date_from and date_to and date_from > date_to:
            raise serializers.ValidationError({'date_to': 'date_to must be on or after date_from'})
        return attrs


class MonthQuerySerializer(serializers.Serializer):
    """Year/month query parameters; defaults to the current month."""

    year = serializers.IntegerField(min_value=1970, max_value=9999, required=False)
    month = serializers.IntegerField(min_value=1, max_value=12, required=False)


class CategoryTotalSerializer(serializers.Serializer):
    category_id = serializers.UUIDField()
    name = serializers.CharField()
    icon = serializers.CharField()
    total = serializers.DecimalField(max_digits=12, decimal_places=2)


class MonthlySummarySerializer(serializers.Serializer):
    year = serializers.IntegerField()
    month = serializers.IntegerField()
    total_income = serializers.DecimalField(max_digits=12, decimal_places=2)
    total_expenses = serializers.DecimalField(max_digits=12, decimal_places=2)
    net_savings = serializers.DecimalField(max_digits=12, decimal_places=2)
    expenses_by_category = CategoryTotalSerializer(many=True)


class BudgetLineSerializer(serializers.Serializer):
    category_id = serializers.UUIDField()
    name = serializers.CharField()
    icon = serializers.CharField()
    budgeted = serializers.DecimalField(max_digits=12, decimal_places=2)
    spent = serializers.DecimalField(max_digits=12, decimal_places=2)
    remaining = serializers.DecimalField(max_digits=12, decimal_places=2)
    percentage = serializers.DecimalField(max_digits=8, decimal_places=2)
    level = serializers.CharField()


class BudgetStatusSerializer(serializers.Serializer):
    year = serializers.IntegerField()
    month = serializers.IntegerField()
    total_budgeted = serializers.DecimalField(max_digits=12, decimal_places=2)
    total_spent = serializers.DecimalField(max_digits=12, decimal_places=2)
    categories = BudgetLineSerializer(many=True)
