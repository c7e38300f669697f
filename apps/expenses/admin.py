from django.contrib import admin
from .models import Expense


@admin.register(Expense)
class ExpenseAdmin(admin.ModelAdmin):
    list_display = ['date', 'description', 'category', 'type', 'amount']
    list_filter = ['category', 'type']
    search_fields = ['description']
    date_hierarchy = 'date'
