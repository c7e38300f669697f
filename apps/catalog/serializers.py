from rest_framework import serializers
from .models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Full product serializer."""

    margin = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True)

    class Meta:
        model = Product
        fields = [
            'id',
            'name',
            'price',
            'cost',
            'margin',
            'stock',
            'description',
            'image_url',
            'category',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']


class ProductImportRowSerializer(serializers.ModelSerializer):
    """One row of a bulk import; name uniqueness is resolved by the service."""

    class Meta:
        model = Product
        fields = ['name', 'price', 'cost', 'stock', 'description', 'image_url', 'category']


class ProductImportResultSerializer(serializers.Serializer):
    created = serializers.IntegerField()
    updated = serializers.IntegerField()
