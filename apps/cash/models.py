# ==========================================
# apps/cash/models.py
# ==========================================

from decimal import Decimal
import uuid

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Q
from django.utils import timezone


class CashSessionStatus(models.TextChoices):
    OPEN = 'open', 'Open'
    CLOSED = 'closed', 'Closed'


class CashSession(models.Model):
    """
    One business day of the cash register.

    Opened with the float in the drawer and closed with the counted amount.
    Closing stores the expected amount and the difference so the history
    does not depend on later edits to orders or expenses. At most one
    session can be open at a time.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    start_date = models.DateTimeField(default=timezone.now)
    start_amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    status = models.CharField(
        max_length=10,
        choices=CashSessionStatus.choices,
        default=CashSessionStatus.OPEN
    )

    # Set on close
    end_date = models.DateTimeField(null=True, blank=True)
    end_amount = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    expected_amount = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    difference = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)

    opened_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='opened_cash_sessions'
    )
    closed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='closed_cash_sessions'
    )

    class Meta:
        db_table = 'cash_sessions'
        constraints = [
            models.UniqueConstraint(
                fields=['status'],
                condition=Q(status='open'),
                name='unique_open_cash_session',
            ),
        ]
        indexes = [
            models.Index(fields=['status', 'start_date'], name='cash_sess_status_7e2b4d_idx'),
        ]
        ordering = ['-start_date']

    def __str__(self):
        return f"Cash session {self.start_date:%Y-%m-%d} ({self.status})"

    @property
    def is_open(self):
        return self.status == CashSessionStatus.OPEN
