from django.db.models import Count
from rest_framework import viewsets, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsApprovedMember
from .models import Order
from .serializers import (
    OrderSerializer,
    OrderListSerializer,
    CheckoutSerializer,
    DateRangeSerializer,
    OrderFilterSerializer,
    SalesTotalsSerializer,
)
from .services import (
    checkout as checkout_cart,
    day_bounds,
    sales_totals,
    EmptyCartError,
)


class OrderPagination(PageNumberPagination):
    """Custom pagination for orders."""
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 200


class OrderViewSet(viewsets.ReadOnlyModelViewSet):
    """
    ViewSet for completed orders.

    list: Orders, newest first (filter: date_from, date_to, payment_method,
          service_type)
    retrieve: Order with its lines
    """

    queryset = Order.objects.all()
    permission_classes = [IsAuthenticated, IsApprovedMember]
    pagination_class = OrderPagination

    def get_serializer_class(self):
        if self.action == 'list':
            return OrderListSerializer
        return OrderSerializer

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action != 'list':
            return queryset.prefetch_related('items')

        filters = OrderFilterSerializer(data=self.request.query_params)
        filters.is_valid(raise_exception=True)
        params = filters.validated_data

        start, end = day_bounds(params.get('date_from'), params.get('date_to'))
        if start is not None:
            queryset = queryset.filter(date__gte=start)
        if end is not None:
            queryset = queryset.filter(date__lt=end)
        if 'payment_method' in params:
            queryset = queryset.filter(payment_method=params['payment_method'])
        if 'service_type' in params:
            queryset = queryset.filter(service_type=params['service_type'])
        return queryset.annotate(item_count=Count('items')).order_by('-date')


@extend_schema(
    request=CheckoutSerializer,
    responses={201: OrderSerializer},
    description="Check out a cart. Duplicate products are merged and lines "
                "with quantity <= 0 are dropped.",
    tags=['sales'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsApprovedMember])
def checkout(request):
    """Checkout - thin HTTP handler."""
    serializer = CheckoutSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        order = checkout_cart(created_by=request.user, **serializer.validated_data)
    except EmptyCartError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)


@extend_schema(
    parameters=[DateRangeSerializer],
    responses={200: SalesTotalsSerializer},
    description="Total, cash and card sales for an inclusive date range.",
    tags=['sales'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsApprovedMember])
def totals(request):
    """Sales totals - thin HTTP handler."""
    query = DateRangeSerializer(data=request.query_params)
    query.is_valid(raise_exception=True)

    start, end = day_bounds(
        query.validated_data.get('date_from'),
        query.validated_data.get('date_to'),
    )
    data = sales_totals(start=start, end=end)
    return Response(SalesTotalsSerializer(data).data)
