from django.contrib import admin
from .models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    readonly_fields = ['product', 'product_name', 'price', 'quantity']


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ['date', 'client_name', 'service_type', 'payment_method', 'total']
    list_filter = ['service_type', 'payment_method']
    search_fields = ['client_name']
    date_hierarchy = 'date'
    inlines = [OrderItemInline]
