from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsApprovedMember
from apps.sales.services import day_bounds
from .models import Expense
from .serializers import ExpenseSerializer, ExpenseFilterSerializer, ExpenseTotalSerializer
from .services import record_expense, expenses_total


class ExpensePagination(PageNumberPagination):
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 200


class ExpenseViewSet(viewsets.ModelViewSet):
    """
    ViewSet for business expenses.

    list: Expenses, newest first (filter: category, type, date_from, date_to)
    create: Record an expense attributed to the caller
    total: Sum of the filtered expenses
    """

    queryset = Expense.objects.select_related('recorded_by')
    serializer_class = ExpenseSerializer
    permission_classes = [IsAuthenticated, IsApprovedMember]
    pagination_class = ExpensePagination

    def _filter_params(self):
        filters = ExpenseFilterSerializer(data=self.request.query_params)
        filters.is_valid(raise_exception=True)
        return filters.validated_data

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action != 'list':
            return queryset

        params = self._filter_params()
        start, end = day_bounds(params.get('date_from'), params.get('date_to'))
        if start is not None:
            queryset = queryset.filter(date__gte=start)
        if end is not None:
            queryset = queryset.filter(date__lt=end)
        if 'category' in params:
            queryset = queryset.filter(category=params['category'])
        if 'type' in params:
            queryset = queryset.filter(type=params['type'])
        return queryset

    def perform_create(self, serializer):
        serializer.instance = record_expense(
            recorded_by=self.request.user,
            **serializer.validated_data
        )

    @extend_schema(
        parameters=[ExpenseFilterSerializer],
        responses={200: ExpenseTotalSerializer},
        description="Total expenses for an inclusive date range.",
        tags=['expenses'],
    )
    @action(detail=False, methods=['get'])
    def total(self, request):
        params = self._filter_params()
        start, end = day_bounds(params.get('date_from'), params.get('date_to'))
        return Response(ExpenseTotalSerializer({'total': expenses_total(start=start, end=end)}).data)
