from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsApprovedMember
from .models import Product, EXTRA_CATEGORIES
from .serializers import (
    ProductSerializer,
    ProductImportRowSerializer,
    ProductImportResultSerializer,
)
from .services import import_products


class ProductViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Product CRUD operations.

    list: Get all products (filterable by category; ``extras=true`` limits
          to products that can be consumed in a coworking session)
    create: Create a product
    retrieve: Get a product
    update: Update a product
    destroy: Delete a product (past orders keep the captured name/price)
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    permission_classes = [IsAuthenticated, IsApprovedMember]

    def get_queryset(self):
        queryset = super().get_queryset()
        params = self.request.query_params

        category = params.get('category')
        if category:
            queryset = queryset.filter(category=category)
        if params.get('extras') in ('1', 'true', 'True'):
            queryset = queryset.filter(category__in=EXTRA_CATEGORIES)
        search = params.get('search')
        if search:
            queryset = queryset.filter(name__icontains=search)
        return queryset

    @extend_schema(
        request=ProductImportRowSerializer(many=True),
        responses={200: ProductImportResultSerializer},
        description="Bulk upsert products by (case-insensitive) name.",
        tags=['products'],
    )
    @action(detail=False, methods=['post'], url_path='import')
    def bulk_import(self, request):
        """Import a list of products."""
        serializer = ProductImportRowSerializer(data=request.data, many=True)
        serializer.is_valid(raise_exception=True)

        result = import_products(rows=serializer.validated_data)
        return Response(ProductImportResultSerializer(result).data)
