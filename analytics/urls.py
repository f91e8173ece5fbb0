from django.urls import path
from .views import AnalyticsView, AnalyticsOverviewView, AnalyticsTrendsView

urlpatterns = [
    path('analytics', AnalyticsView.as_view(), name='analytics'),
    path('analytics/overview', AnalyticsOverviewView.as_view(), name='analytics-overview'),
    path('analytics/trends', AnalyticsTrendsView.as_view(), name='analytics-trends'),
]
