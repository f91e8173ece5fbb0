from django.contrib import admin
from .models import Subscription


@admin.register(Subscription)
class SubscriptionAdmin(admin.ModelAdmin):
    list_display = ('user', 'plan', 'price', 'status', 'verified_at', 'created_at')
    list_filter = ('plan', 'status')
    search_fields = ('user__email', 'user__username')
