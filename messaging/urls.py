from django.urls import path
from .views import SendShortlistSMSView

urlpatterns = [
    path('applications/send-sms', SendShortlistSMSView.as_view(), name='send-sms'),
]
