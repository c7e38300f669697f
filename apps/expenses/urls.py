from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'expenses'

router = DefaultRouter()
router.register(r'', views.ExpenseViewSet, basename='expense')

urlpatterns = [
    # GET    /api/expenses/            - List expenses (filter: category, type, date range)
    # POST   /api/expenses/            - Record expense
    # GET    /api/expenses/total/      - Total for a date range
    # GET    /api/expenses/{id}/       - Expense detail
    # PUT    /api/expenses/{id}/       - Update expense
    # DELETE /api/expenses/{id}/       - Delete expense
    path('', include(router.urls)),
]
