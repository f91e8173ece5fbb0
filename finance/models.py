from django.db import models
from django.conf import settings
from django.utils.translation import gettext_lazy as _


class Subscription(models.Model):
    """
    A plan purchase paid outside the platform. The employer uploads proof
    of payment and an admin verifies it by hand.
    """

    class Plan(models.TextChoices):
        FREE = 'free', _('Free')
        PROFESSIONAL = 'professional', _('Professional')
        ENTERPRISE = 'enterprise', _('Enterprise')

    class Status(models.TextChoices):
        PENDING = 'pending', _('Pending Verification')
        ACTIVE = 'active', _('Active')
        REJECTED = 'rejected', _('Rejected')

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='subscriptions'
    )
    plan = models.CharField(max_length=20, choices=Plan.choices)
    price = models.PositiveIntegerField(help_text=_("Amount in cents"))
    screenshot = models.ImageField(upload_to='payment_screenshots/')
    status = models.CharField(max_length=10, choices=Status.choices, default=Status.PENDING)

    # Audit
    verified_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='verified_subscriptions'
    )
    verified_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.user.email} - {self.plan} ({self.status})"
