from django.contrib import admin
from .models import Job, Application, JobView


@admin.register(Job)
class JobAdmin(admin.ModelAdmin):
    list_display = ('title', 'company', 'location', 'job_type', 'remote', 'created_at')
    list_filter = ('job_type', 'experience_level', 'remote')
    search_fields = ('title', 'company', 'description')


@admin.register(Application)
class ApplicationAdmin(admin.ModelAdmin):
    list_display = ('job', 'seeker', 'status', 'ats_score', 'applied_at')
    list_filter = ('status',)


admin.site.register(JobView)
