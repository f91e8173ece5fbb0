"""
Job alert matching and the email digest sent for due alerts.
"""
import logging
from datetime import timedelta
from smtplib import SMTPException

from django.conf import settings
from django.core.mail import send_mail
from django.utils import timezone

from jobs.filters import JobFilters
from jobs.models import Job
from .models import EmailNotification, JobAlert

logger = logging.getLogger(__name__)

INTERVALS = {
    JobAlert.Frequency.DAILY: timedelta(days=1),
    JobAlert.Frequency.WEEKLY: timedelta(days=7),
}


def filters_for(alert):
    return JobFilters(
        keywords=[keyword for keyword in alert.keywords or [] if keyword],
        location=alert.location or '',
        job_type=alert.job_type or None,
        experience_level=alert.experience_level or None,
        salary_min=alert.min_salary,
        salary_max=alert.max_salary,
        remote=bool(alert.remote),
        industries=[industry for industry in alert.industries or [] if industry],
    )


def matching_jobs(alert, since=None, until=None):
    """
    Jobs matching the alert posted in the window (since, until].
    """
    jobs = Job.objects.all()
    if since is not None:
        jobs = jobs.filter(created_at__gt=since)
    if until is not None:
        jobs = jobs.filter(created_at__lte=until)
    return filters_for(alert).apply(jobs)


def is_due(alert, now=None):
    if alert.last_notified is None:
        return True
    now = now or timezone.now()
    return now - alert.last_notified >= INTERVALS.get(alert.frequency, INTERVALS[JobAlert.Frequency.DAILY])


def due_alerts(now=None):
    alerts = JobAlert.objects.filter(is_active=True, notify_email=True).select_related('user')
    return [alert for alert in alerts if is_due(alert, now)]


def build_digest(alert, jobs):
    count = len(jobs)
    subject = f"{count} new job{'s' if count != 1 else ''} for \"{alert.name}\""
    lines = [f"Hi {alert.user.username},", "", "New jobs matching your alert:", ""]
    for job in jobs:
        lines.append(f"- {job.title} at {job.company} ({job.location}) {job.salary}".rstrip())
    return subject, "\n".join(lines)


def send_digest(alert, jobs, now=None):
    """
    Records the digest, emails it and stamps the alert.
    """
    now = now or timezone.now()
    subject, content = build_digest(alert, jobs)
    notification = EmailNotification.objects.create(
        user=alert.user,
        alert=alert,
        job_ids=[job.id for job in jobs],
        subject=subject,
        content=content,
    )

    try:
        send_mail(subject, content, settings.DEFAULT_FROM_EMAIL, [alert.user.email], fail_silently=False)
    except (SMTPException, OSError) as exc:
        logger.error("Alert %s digest to %s failed: %s", alert.id, alert.user.email, exc)
        notification.status = EmailNotification.Status.FAILED
        notification.error_message = str(exc)
    else:
        notification.status = EmailNotification.Status.SENT
        notification.sent_at = now
    notification.save(update_fields=['status', 'error_message', 'sent_at'])

    alert.last_notified = now
    alert.save(update_fields=['last_notified'])
    return notification


def process_alerts(dry_run=False, now=None):
    """
    Sends a digest for every due alert with new matches.
    Returns (alert, jobs, notification) for each alert that had matches;
    notification is None on a dry run.
    """
    now = now or timezone.now()
    results = []
    for alert in due_alerts(now):
        jobs = matching_jobs(alert, since=alert.last_notified, until=now)
        if not jobs:
            continue
        notification = None if dry_run else send_digest(alert, jobs, now)
        results.append((alert, jobs, notification))
    return results
