# ==========================================
# apps/accounts/admin.py
# ==========================================

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html
from .models import User, MemberStatus


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin interface for household / business members."""

    list_display = [
        'username',
        'email',
        'role',
        'status_badge',
        'is_active',
        'created_at',
        'last_login',
    ]

    list_filter = [
        'role',
        'status',
        'is_active',
        'is_staff',
    ]

    search_fields = [
        'username',
        'email',
    ]

    ordering = ['username']

    fieldsets = (
        ('Basic Information', {
            'fields': ('username', 'email', 'password', 'telegram_id')
        }),
        ('Membership', {
            'fields': ('role', 'status'),
        }),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
            'classes': ('collapse',),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        ('Create Member', {
            'classes': ('wide',),
            'fields': ('username', 'email', 'password1', 'password2', 'role', 'status'),
        }),
    )

    readonly_fields = ['created_at', 'last_login']

    filter_horizontal = ['groups', 'user_permissions']

    def status_badge(self, obj):
        """Display approval status as colored badge."""
        if obj.status == MemberStatus.APPROVED:
            return format_html(
                '<span style="background: #6B8E5E; color: white; padding: 3px 8px; '
                'border-radius: 10px; font-size: 11px;">{}</span>',
                'Approved'
            )
        return format_html(
            '<span style="background: #E5C49A; color: #2C1810; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            'Pending'
        )
    status_badge.short_description = 'Status'
    status_badge.admin_order_field = 'status'

    actions = ['approve_members']

    @admin.action(description='Approve selected members')
    def approve_members(self, request, queryset):
        """Approve selected members."""
        count = queryset.update(status=MemberStatus.APPROVED)
        self.message_user(request, f'Approved {count} member(s).')
