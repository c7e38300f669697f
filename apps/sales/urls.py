from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'sales'

router = DefaultRouter()
router.register(r'orders', views.OrderViewSet, basename='order')

urlpatterns = [
    # POST /api/sales/checkout/          - Check out a cart
    # GET  /api/sales/totals/            - Total/cash/card sales for a range
    # GET  /api/sales/orders/            - List orders
    # GET  /api/sales/orders/{id}/       - Order detail
    path('checkout/', views.checkout, name='checkout'),
    path('totals/', views.totals, name='totals'),

    path('', include(router.urls)),
]
