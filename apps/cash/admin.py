from django.contrib import admin
from .models import CashSession


@admin.register(CashSession)
class CashSessionAdmin(admin.ModelAdmin):
    list_display = ['start_date', 'status', 'start_amount', 'end_amount', 'expected_amount', 'difference']
    list_filter = ['status']
    readonly_fields = ['expected_amount', 'difference']
    date_hierarchy = 'start_date'
