from django.contrib import admin
from .models import OutboundMessage


@admin.register(OutboundMessage)
class OutboundMessageAdmin(admin.ModelAdmin):
    list_display = ('to_number', 'sender', 'status', 'provider_sid', 'created_at')
    list_filter = ('status',)
