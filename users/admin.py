from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin
from .models import User


@admin.register(User)
class UserAdmin(DjangoUserAdmin):
    list_display = ('email', 'username', 'role', 'company_name', 'is_active')
    list_filter = ('role', 'is_active', 'is_staff')
    search_fields = ('email', 'username', 'company_name')
    fieldsets = DjangoUserAdmin.fieldsets + (
        ('Job board', {'fields': ('role', 'phone', 'bio', 'location', 'resume_url', 'skills')}),
        ('Company', {'fields': (
            'company_name', 'company_size', 'industry', 'founded', 'website',
            'company_description', 'benefits', 'culture', 'logo',
        )}),
    )
    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'username', 'role', 'password1', 'password2'),
        }),
    )
