from django.contrib import admin
from .models import TransactionCategory, Transaction, Budget


@admin.register(TransactionCategory)
class TransactionCategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'icon', 'type', 'created_at']
    list_filter = ['type']
    search_fields = ['name']


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    list_display = ['date', 'description', 'amount', 'type', 'category', 'member']
    list_filter = ['type', 'category', 'date']
    search_fields = ['description', 'member__username']
    date_hierarchy = 'date'
    list_select_related = ['category', 'member']


@admin.register(Budget)
class BudgetAdmin(admin.ModelAdmin):
    list_display = ['category', 'amount', 'updated_at']
    list_select_related = ['category']
