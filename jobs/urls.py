from django.urls import path
from .views import (
    JobListCreateView, JobDetailView, JobViewRecordView, ApplyJobView, HasAppliedView,
    SeekerApplicationsView, EmployerApplicationsView, ApplicationListView,
    ApplicationStatusView, ApplicationScheduleView, ApplicationStatsView, ApplicationExportView,
)

urlpatterns = [
    # Public & Employer
    path('jobs', JobListCreateView.as_view(), name='job-list'),  # GET (search), POST (create)
    path('jobs/<int:pk>', JobDetailView.as_view(), name='job-detail'),
    path('jobs/<int:pk>/view', JobViewRecordView.as_view(), name='job-view'),

    # Seeker
    path('jobs/<int:pk>/apply', ApplyJobView.as_view(), name='job-apply'),
    path('jobs/<int:pk>/has-applied', HasAppliedView.as_view(), name='job-has-applied'),
    path('applications/seeker', SeekerApplicationsView.as_view(), name='seeker-applications'),

    # Employer Management
    path('applications', ApplicationListView.as_view(), name='application-list'),
    path('applications/employer', EmployerApplicationsView.as_view(), name='employer-applications'),
    path('applications/stats', ApplicationStatsView.as_view(), name='application-stats'),
    path('applications/export', ApplicationExportView.as_view(), name='application-export'),
    path('applications/<int:pk>/status', ApplicationStatusView.as_view(), name='application-status'),
    path('applications/<int:pk>/schedule', ApplicationScheduleView.as_view(), name='application-schedule'),
]
