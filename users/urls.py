from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView
from .views import (
    RegisterView, LoginView, LogoutView, CurrentUserView,
    UserProfileView, CsrfTokenView, ResumeUploadView, TokenView,
)

urlpatterns = [
    # Session Auth
    path('register', RegisterView.as_view(), name='register'),
    path('login', LoginView.as_view(), name='login'),
    path('logout', LogoutView.as_view(), name='logout'),
    path('csrf-token', CsrfTokenView.as_view(), name='csrf-token'),

    # Bearer tokens for API clients (admin console)
    path('token', TokenView.as_view(), name='token_obtain_pair'),
    path('token/refresh', TokenRefreshView.as_view(), name='token_refresh'),

    # Profile
    path('user', CurrentUserView.as_view(), name='current-user'),
    path('auth/me', UserProfileView.as_view(), name='profile'),
    path('upload-resume', ResumeUploadView.as_view(), name='upload-resume'),
]
