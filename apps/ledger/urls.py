from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'ledger'

router = DefaultRouter()
router.register(r'categories', views.TransactionCategoryViewSet, basename='category')
router.register(r'transactions', views.TransactionViewSet, basename='transaction')

urlpatterns = [
    # GET /api/ledger/budgets/           - List budgets
    # PUT /api/ledger/budgets/           - Set (or clear) a category budget
    # GET /api/ledger/budgets/status/    - Spending vs budget for a month
    # GET /api/ledger/summary/           - Monthly income/expense summary
    path('budgets/', views.budgets, name='budgets'),
    path('budgets/status/', views.budget_status_view, name='budget-status'),
    path('summary/', views.summary, name='summary'),

    path('', include(router.urls)),
]
