import csv
import io
import logging

from django.db.models import Count
from rest_framework.exceptions import NotFound, PermissionDenied

from .ats import MIN_SHORTLIST_SCORE, calculate_ats_score
from .models import Application, Job, JobView

logger = logging.getLogger(__name__)


def jobs_with_counts(queryset=None):
    queryset = queryset if queryset is not None else Job.objects.all()
    return queryset.annotate(
        view_count=Count('job_views', distinct=True),
        application_count=Count('applications', distinct=True),
    )


def get_job_or_404(job_id):
    try:
        return Job.objects.get(pk=job_id)
    except Job.DoesNotExist:
        raise NotFound("Job not found")


def employer_applications(employer):
    """
    Every application to a job posted by `employer`.
    """
    return (
        Application.objects
        .filter(job__employer=employer)
        .select_related('job', 'seeker')
        .order_by('-applied_at')
    )


def accepted_applications(employer, job_id=None):
    applications = employer_applications(employer).filter(status=Application.Status.ACCEPTED)
    if job_id:
        applications = applications.filter(job_id=job_id)
    return applications


def get_owned_application(employer, application_id, action="update this application"):
    """
    Fetch an application and check that `employer` posted its job.
    """
    try:
        application = Application.objects.select_related('job', 'seeker').get(pk=application_id)
    except Application.DoesNotExist:
        raise NotFound("Application not found")

    if application.job.employer_id != employer.id:
        raise PermissionDenied(f"You are not authorized to {action}")
    return application


def shortlist_by_score(applications):
    """
    Scores (and caches) each application; keeps those at or above the
    shortlist threshold.
    """
    shortlisted = []
    for application in applications:
        if application.ats_score is None:
            application.ats_score = calculate_ats_score(application)
            application.save(update_fields=['ats_score'])
        if application.ats_score >= MIN_SHORTLIST_SCORE:
            shortlisted.append(application)
    return shortlisted


def record_view(job, user):
    """
    Counts one view per authenticated user and returns the job's total.
    """
    if user is not None and user.is_authenticated:
        _, created = JobView.objects.get_or_create(job=job, user=user)
        if created:
            logger.debug("User %s viewed job %s", user.id, job.id)
    return JobView.objects.filter(job=job).count()


def application_stats(applications):
    applications = list(applications)
    return {
        "total_applications": len(applications),
        "shortlisted": sum(1 for app in applications if app.status == Application.Status.ACCEPTED),
        "interviews_scheduled": sum(1 for app in applications if app.status == Application.Status.INTERVIEW),
        "hired": sum(1 for app in applications if app.status == Application.Status.HIRED),
    }


def _format_date(value):
    return value.date().isoformat() if value else "N/A"


def export_applications_csv(applications):
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(["ID", "Job Title", "Candidate Name", "Status", "Applied At", "Interview Date"])
    for app in applications:
        writer.writerow([
            app.id,
            app.job.title if app.job else "Unknown",
            app.seeker.username if app.seeker else "Unknown",
            app.status,
            _format_date(app.applied_at),
            _format_date(app.interview_date),
        ])
    return buffer.getvalue()
