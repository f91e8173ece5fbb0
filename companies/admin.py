from django.contrib import admin
from .models import CompanyReview, OfficePhoto


@admin.register(CompanyReview)
class CompanyReviewAdmin(admin.ModelAdmin):
    list_display = ('company', 'user', 'rating', 'is_verified', 'created_at')
    list_filter = ('rating', 'is_verified')


admin.site.register(OfficePhoto)
