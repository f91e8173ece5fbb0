from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static

from .admin_views import AdminSubscriptionListView, AdminVerifySubscriptionView

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include('users.urls')),
    path('api/', include('jobs.urls')),
    path('api/', include('messaging.urls')),
    path('api/', include('analytics.urls')),
    path('api/', include('companies.urls')),
    path('api/', include('alerts.urls')),
    path('api/', include('finance.urls')),

    # Platform admin
    path('api/admin/subscriptions', AdminSubscriptionListView.as_view(), name='admin-subscriptions'),
    path('api/admin/subscriptions/<int:pk>/verify', AdminVerifySubscriptionView.as_view(), name='admin-subscription-verify'),
]

# Serve uploaded resumes, logos and screenshots in development
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
