from rest_framework import viewsets, mixins, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from django.utils import timezone
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsApprovedMember
from .models import TransactionCategory, Transaction, Budget
from .serializers import (
    TransactionCategorySerializer,
    TransactionSerializer,
    BudgetSerializer,
    SetBudgetSerializer,
    TransactionFilterSerializer,
    MonthQuerySerializer,
    MonthlySummarySerializer,
    BudgetStatusSerializer,
)
from .services import (
    create_category,
    delete_category,
    record_transaction,
    update_transaction,
    set_budget,
    monthly_summary,
    budget_status,
    CategoryNotFoundError,
    CategoryInUseError,
    CategoryTypeMismatchError,
    InvalidBudgetCategoryError,
)


class LedgerPagination(PageNumberPagination):
    """Custom pagination for ledger entries."""
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 200


class TransactionCategoryViewSet(
    mixins.ListModelMixin,
    mixins.CreateModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """
    ViewSet for transaction categories.

    list: Get all categories (filterable by type)
    create: Create a category
    retrieve: Get a category
    destroy: Delete a category that is not in use
    """

    queryset = TransactionCategory.objects.all()
    serializer_class = TransactionCategorySerializer
    permission_classes = [IsAuthenticated, IsApprovedMember]

    def get_queryset(self):
        queryset = super().get_queryset()
        entry_type = self.request.query_params.get('type')
        if entry_type:
            queryset = queryset.filter(type=entry_type)
        return queryset

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        category = create_category(**serializer.validated_data)

        return Response(
            TransactionCategorySerializer(category).data,
            status=status.HTTP_201_CREATED
        )

    def destroy(self, request, *args, **kwargs):
        try:
            delete_category(category_id=self.kwargs['pk'])
        except CategoryNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except CategoryInUseError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)
        return Response(status=status.HTTP_204_NO_CONTENT)


class TransactionViewSet(viewsets.ModelViewSet):
    """
    ViewSet for household income and expense entries.

    All members of the household see every entry; new entries are
    attributed to the caller.
    """

    queryset = Transaction.objects.select_related('category', 'member')
    serializer_class = TransactionSerializer
    permission_classes = [IsAuthenticated, IsApprovedMember]
    pagination_class = LedgerPagination

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action != 'list':
            return queryset

        filters = TransactionFilterSerializer(data=self.request.query_params)
        filters.is_valid(raise_exception=True)
        params = filters.validated_data

        if 'type' in params:
            queryset = queryset.filter(type=params['type'])
        if 'category' in params:
            queryset = queryset.filter(category_id=params['category'])
        if 'date_from' in params:
            queryset = queryset.filter(date__gte=params['date_from'])
        if 'date_to' in params:
            queryset = queryset.filter(date__lte=params['date_to'])
        return queryset

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            entry = record_transaction(member=request.user, **serializer.validated_data)
        except CategoryTypeMismatchError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(TransactionSerializer(entry).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        entry = self.get_object()
        serializer = self.get_serializer(entry, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            entry = update_transaction(transaction=entry, **serializer.validated_data)
        except CategoryTypeMismatchError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(TransactionSerializer(entry).data)


@extend_schema(
    methods=['GET'],
    responses={200: BudgetSerializer(many=True)},
    description="List category budgets.",
    tags=['ledger'],
)
@extend_schema(
    methods=['PUT'],
    request=SetBudgetSerializer,
    responses={200: BudgetSerializer, 204: None},
    description="Set a category's monthly budget. Amount <= 0 removes the budget.",
    tags=['ledger'],
)
@api_view(['GET', 'PUT'])
@permission_classes([IsAuthenticated, IsApprovedMember])
def budgets(request):
    """List or set category budgets."""
    if request.method == 'GET':
        queryset = Budget.objects.select_related('category')
        return Response(BudgetSerializer(queryset, many=True).data)

    serializer = SetBudgetSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        budget = set_budget(
            category_id=serializer.validated_data['category'],
            amount=serializer.validated_data['amount'],
        )
    except CategoryNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except InvalidBudgetCategoryError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    if budget is None:
        return Response(status=status.HTTP_204_NO_CONTENT)
    return Response(BudgetSerializer(budget).data)


def _resolve_month(request):
    query = MonthQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    today = timezone.localdate()
    return (
        query.validated_data.get('year', today.year),
        query.validated_data.get('month', today.month),
    )


@extend_schema(
    parameters=[MonthQuerySerializer],
    responses={200: BudgetStatusSerializer},
    description="Spending against budget per expense category for a month.",
    tags=['ledger'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsApprovedMember])
def budget_status_view(request):
    """Budget usage - thin HTTP handler."""
    year, month = _resolve_month(request)
    data = budget_status(year=year, month=month)
    return Response(BudgetStatusSerializer(data).data)


@extend_schema(
    parameters=[MonthQuerySerializer],
    responses={200: MonthlySummarySerializer},
    description="Income, expenses and net savings for a month.",
    tags=['ledger'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsApprovedMember])
def summary(request):
    """Monthly summary - thin HTTP handler."""
    year, month = _resolve_month(request)
    data = monthly_summary(year=year, month=month)
    return Response(MonthlySummarySerializer(data).data)
