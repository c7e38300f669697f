from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'catalog'

router = DefaultRouter()
router.register(r'', views.ProductViewSet, basename='product')

urlpatterns = [
    # Product ViewSet routes
    # GET    /api/products/            - List products (filter: category, extras)
    # POST   /api/products/            - Create product
    # GET    /api/products/{id}/       - Product detail
    # PUT    /api/products/{id}/       - Update product
    # DELETE /api/products/{id}/       - Delete product
    # POST   /api/products/import/     - Bulk upsert by name
    path('', include(router.urls)),
]
