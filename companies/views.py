import logging

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from rest_framework import generics, permissions, status
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from users.permissions import IsEmployer, IsSeeker
from . import services
from .models import CompanyReview
from .serializers import (
    BrandingSerializer, CompanyDetailSerializer, CompanyReviewSerializer, CompanySummarySerializer,
)

User = get_user_model()
logger = logging.getLogger(__name__)

ALREADY_REVIEWED = "You have already reviewed this company"


class CompanyListView(generics.ListAPIView):
    """
    Company directory, searchable by name or industry.
    """
    serializer_class = CompanySummarySerializer
    permission_classes = (permissions.AllowAny,)

    def get_queryset(self):
        return services.employers(self.request.query_params.get('search', '').strip())


class CompanyDetailView(generics.RetrieveAPIView):
    serializer_class = CompanyDetailSerializer
    permission_classes = (permissions.AllowAny,)

    def get_object(self):
        return services.get_employer_or_404(self.kwargs['pk'])


class CompanyReviewListView(generics.ListCreateAPIView):
    """
    GET: Reviews of a company.
    POST: A seeker reviews a company, once.
    """
    serializer_class = CompanyReviewSerializer

    def get_permissions(self):
        if self.request.method == 'POST':
            return [IsSeeker()]
        return [permissions.AllowAny()]

    def get_company(self):
        return services.get_employer_or_404(self.kwargs['pk'])

    def get_queryset(self):
        return CompanyReview.objects.filter(company=self.get_company())

    def perform_create(self, serializer):
        company = self.get_company()
        if CompanyReview.objects.filter(company=company, user=self.request.user).exists():
            raise ValidationError(ALREADY_REVIEWED)
        try:
            with transaction.atomic():
                serializer.save(company=company, user=self.request.user)
        except IntegrityError:
            raise ValidationError(ALREADY_REVIEWED)


class BrandingView(APIView):
    """
    GET: Branding of ?employer_id= (defaults to the calling employer).
    PATCH/PUT: The employer updates their own company page.
    """
    parser_classes = (MultiPartParser, FormParser, JSONParser)

    def get_permissions(self):
        if self.request.method in permissions.SAFE_METHODS:
            return [permissions.IsAuthenticated()]
        return [IsEmployer()]

    def get(self, request):
        employer_id = request.query_params.get('employer_id')
        if employer_id:
            if not str(employer_id).isdigit():
                raise ValidationError("Invalid employer ID")
            employer = User.objects.filter(pk=employer_id, role=User.Roles.EMPLOYER).first()
            if employer is None:
                raise NotFound("Employer not found")
        elif request.user.is_employer:
            employer = request.user
        else:
            raise ValidationError("employer_id is required")
        return Response(BrandingSerializer(employer).data)

    def patch(self, request):
        serializer = BrandingSerializer(request.user, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        logger.info("Employer %s updated branding", request.user.id)
        return Response(serializer.data, status=status.HTTP_200_OK)

    post = put = patch
