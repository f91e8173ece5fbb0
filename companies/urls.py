from django.urls import path
from .views import CompanyListView, CompanyDetailView, CompanyReviewListView, BrandingView

urlpatterns = [
    path('companies', CompanyListView.as_view(), name='company-list'),
    path('companies/<int:pk>', CompanyDetailView.as_view(), name='company-detail'),
    path('companies/<int:pk>/reviews', CompanyReviewListView.as_view(), name='company-reviews'),
    path('employer/branding', BrandingView.as_view(), name='employer-branding'),
]
