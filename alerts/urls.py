from django.urls import path
from .views import JobAlertListView, JobAlertDetailView, JobAlertMatchesView

urlpatterns = [
    path('alerts', JobAlertListView.as_view(), name='alert-list'),
    path('alerts/<int:pk>', JobAlertDetailView.as_view(), name='alert-detail'),
    path('alerts/<int:pk>/matches', JobAlertMatchesView.as_view(), name='alert-matches'),
]
