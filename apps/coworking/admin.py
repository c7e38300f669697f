from django.contrib import admin
from .models import CoworkingSession, ConsumedExtra


class ConsumedExtraInline(admin.TabularInline):
    model = ConsumedExtra
    extra = 0


@admin.register(CoworkingSession)
class CoworkingSessionAdmin(admin.ModelAdmin):
    list_display = ['client_name', 'start_time', 'end_time', 'status', 'total']
    list_filter = ['status']
    search_fields = ['client_name']
    inlines = [ConsumedExtraInline]
