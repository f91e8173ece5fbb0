from django.db import models
from django.conf import settings
from django.utils.translation import gettext_lazy as _


class OutboundMessage(models.Model):
    """
    Every SMS sent (or simulated) to a candidate.
    """

    class Status(models.TextChoices):
        QUEUED = 'queued', _('Queued')
        SENT = 'sent', _('Sent')
        SIMULATED = 'simulated', _('Simulated')
        FAILED = 'failed', _('Failed')

    sender = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name='sent_messages'
    )
    application = models.ForeignKey(
        'jobs.Application',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='messages'
    )
    to_number = models.CharField(max_length=20)
    body = models.TextField()
    status = models.CharField(max_length=10, choices=Status.choices, default=Status.QUEUED)
    provider_sid = models.CharField(max_length=64, blank=True, null=True)  # Twilio message SID
    error_message = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"SMS to {self.to_number} [{self.status}]"
