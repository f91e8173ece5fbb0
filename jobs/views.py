import logging

from django.db import IntegrityError, transaction
from django.http import HttpResponse
from rest_framework import generics, permissions, status
from rest_framework.exceptions import PermissionDenied, ValidationError
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from users.permissions import IsEmployer, IsSeeker
from . import services
from .ats import score_resume
from .filters import JobFilters
from .models import Application
from .serializers import (
    ApplicationDetailSerializer, ApplicationSerializer, ApplicationStatusSerializer,
    ApplyToJobSerializer, InterviewScheduleSerializer, JobSerializer,
)

logger = logging.getLogger(__name__)

ALREADY_APPLIED = "You have already applied for this job"

# --- JOB POSTINGS ---

class JobListCreateView(generics.ListCreateAPIView):
    """
    GET: Public job search.
    POST: Employer posts a new job.
    """
    serializer_class = JobSerializer

    def get_permissions(self):
        if self.request.method == 'POST':
            return [IsEmployer()]
        return [permissions.AllowAny()]

    def get_queryset(self):
        return services.jobs_with_counts()

    def list(self, request, *args, **kwargs):
        jobs = JobFilters.from_query_params(request.query_params).apply(self.get_queryset())
        return Response(self.get_serializer(jobs, many=True).data)

    def perform_create(self, serializer):
        job = serializer.save(employer=self.request.user)
        logger.info("Employer %s posted job %s", self.request.user.id, job.id)


class JobDetailView(generics.RetrieveUpdateDestroyAPIView):
    """
    GET: View job details.
    PUT/PATCH/DELETE: Only the Employer who posted it.
    """
    serializer_class = JobSerializer

    def get_permissions(self):
        if self.request.method in permissions.SAFE_METHODS:
            return [permissions.AllowAny()]
        return [IsEmployer()]

    def get_queryset(self):
        return services.jobs_with_counts()

    def perform_update(self, serializer):
        if serializer.instance.employer_id != self.request.user.id:
            raise PermissionDenied("You are not authorized to update this job")
        serializer.save()

    def perform_destroy(self, instance):
        if instance.employer_id != self.request.user.id:
            raise PermissionDenied("You are not authorized to delete this job")
        logger.info("Employer %s deleted job %s", self.request.user.id, instance.id)
        instance.delete()


class JobViewRecordView(APIView):
    permission_classes = (permissions.AllowAny,)

    def post(self, request, pk):
        job = services.get_job_or_404(pk)
        views = services.record_view(job, request.user)
        return Response({"message": "View recorded", "views": views})

# --- SEEKER ACTIONS ---

class ApplyJobView(APIView):
    """
    Apply for a specific job with a PDF resume. The application is scored
    against the job as it is created.
    """
    permission_classes = (IsSeeker,)
    parser_classes = (MultiPartParser, FormParser)

    def post(self, request, pk):
        job = services.get_job_or_404(pk)
        if Application.objects.filter(job=job, seeker=request.user).exists():
            raise ValidationError(ALREADY_APPLIED)

        serializer = ApplyToJobSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        resume = serializer.validated_data['resume']

        ats_score = score_resume(job, resume, request.user)
        resume.seek(0)

        try:
            with transaction.atomic():
                application = Application.objects.create(
                    job=job,
                    seeker=request.user,
                    resume=resume,
                    cover_letter=serializer.validated_data.get('cover_letter'),
                    ats_score=ats_score,
                )
        except IntegrityError:
            raise ValidationError(ALREADY_APPLIED)

        logger.info("Seeker %s applied to job %s (ATS %s)", request.user.id, job.id, ats_score)
        return Response(ApplicationSerializer(application).data, status=status.HTTP_201_CREATED)


class HasAppliedView(APIView):
    permission_classes = (IsSeeker,)

    def get(self, request, pk):
        has_applied = Application.objects.filter(job_id=pk, seeker=request.user).exists()
        return Response({"has_applied": has_applied})


class SeekerApplicationsView(generics.ListAPIView):
    serializer_class = ApplicationSerializer
    permission_classes = (IsSeeker,)

    def get_queryset(self):
        return (
            Application.objects
            .filter(seeker=self.request.user)
            .select_related('job')
            .order_by('-applied_at')
        )

# --- EMPLOYER DASHBOARD ---

class EmployerApplicationsView(APIView):
    """
    Applications for MY jobs. Narrowed to one job, only candidates whose
    ATS score reaches the shortlist threshold are returned.
    """
    permission_classes = (IsEmployer,)

    def get(self, request):
        applications = services.employer_applications(request.user)
        job_id = request.query_params.get('job_id')
        if job_id:
            if not str(job_id).isdigit():
                raise ValidationError("Invalid job_id")
            applications = services.shortlist_by_score(applications.filter(job_id=int(job_id)))
        return Response(ApplicationDetailSerializer(applications, many=True).data)


class ApplicationListView(generics.ListAPIView):
    serializer_class = ApplicationDetailSerializer
    permission_classes = (IsEmployer,)

    def get_queryset(self):
        applications = services.employer_applications(self.request.user)
        status_filter = self.request.query_params.get('status')
        if status_filter and status_filter != 'all':
            applications = applications.filter(status=status_filter)
        return applications


class ApplicationStatusView(APIView):
    permission_classes = (IsEmployer,)

    def patch(self, request, pk):
        serializer = ApplicationStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        application = services.get_owned_application(request.user, pk)
        application.status = serializer.validated_data['status']
        application.save(update_fields=['status'])
        logger.info("Application %s moved to %s", application.id, application.status)
        return Response(ApplicationDetailSerializer(application).data)


class ApplicationScheduleView(APIView):
    permission_classes = (IsEmployer,)

    def patch(self, request, pk):
        serializer = InterviewScheduleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        application = services.get_owned_application(
            request.user, pk, action="schedule an interview for this application"
        )
        application.interview_date = serializer.validated_data['interview_date']
        application.status = Application.Status.INTERVIEW
        application.save(update_fields=['interview_date', 'status'])
        return Response(ApplicationDetailSerializer(application).data)


class ApplicationStatsView(APIView):
    permission_classes = (IsEmployer,)

    def get(self, request):
        return Response(services.application_stats(services.employer_applications(request.user)))


class ApplicationExportView(APIView):
    permission_classes = (IsEmployer,)

    def get(self, request):
        content = services.export_applications_csv(services.employer_applications(request.user))
        response = HttpResponse(content, content_type='text/csv')
        response['Content-Disposition'] = 'attachment; filename="applications.csv"'
        return response
