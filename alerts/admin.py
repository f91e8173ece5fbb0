from django.contrib import admin
from .models import JobAlert, EmailNotification


@admin.register(JobAlert)
class JobAlertAdmin(admin.ModelAdmin):
    list_display = ('name', 'user', 'frequency', 'is_active', 'last_notified')
    list_filter = ('frequency', 'is_active')


@admin.register(EmailNotification)
class EmailNotificationAdmin(admin.ModelAdmin):
    list_display = ('subject', 'user', 'status', 'sent_at')
    list_filter = ('status',)
