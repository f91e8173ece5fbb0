"""
Employer dashboard figures, computed over the employer's fetched
applications.
"""
from datetime import timedelta

from django.utils import timezone

from jobs.models import Application, Job, JobView

DEFAULT_DAYS = 30
MAX_DAYS = 365


def parse_days(raw, default=DEFAULT_DAYS):
    try:
        days = int(raw)
    except (TypeError, ValueError):
        return default
    if days <= 0:
        return default
    return min(days, MAX_DAYS)


def window_start(days, now=None):
    now = now or timezone.now()
    return now - timedelta(days=days)


def employer_applications(employer, since=None):
    applications = Application.objects.filter(job__employer=employer)
    if since is not None:
        applications = applications.filter(applied_at__gte=since)
    return list(applications)


def total_views(employer):
    return JobView.objects.filter(job__employer=employer).count()


def status_distribution(applications):
    distribution = {value: 0 for value in Application.Status.values}
    for app in applications:
        distribution[app.status] = distribution.get(app.status, 0) + 1
    return distribution


def avg_time_to_hire(applications, now=None):
    """
    Mean days from application to interview over hired applications;
    a hire without an interview date counts up to now.
    """
    now = now or timezone.now()
    hired = [app for app in applications if app.status == Application.Status.HIRED]
    if not hired:
        return 0
    total = sum(
        ((app.interview_date or now) - (app.applied_at or now)).total_seconds() / 86400
        for app in hired
    )
    return round(total / len(hired))


def conversion_rate(applications):
    if not applications:
        return 0
    hired = sum(1 for app in applications if app.status == Application.Status.HIRED)
    return round(hired / len(applications) * 100, 1)


def trends(applications, days, today=None):
    """
    Applications per calendar day for the `days` days ending today.
    """
    today = today or timezone.localdate()
    counts = {}
    for app in applications:
        if app.applied_at:
            day = timezone.localtime(app.applied_at).date()
            counts[day] = counts.get(day, 0) + 1

    first_day = today - timedelta(days=days - 1)
    return [
        {"date": (first_day + timedelta(days=offset)).isoformat(),
         "applications": counts.get(first_day + timedelta(days=offset), 0)}
        for offset in range(days)
    ]


def dashboard(employer, days, now=None):
    now = now or timezone.now()
    applications = employer_applications(employer, since=window_start(days, now))
    distribution = status_distribution(applications)
    return {
        "total_applications": len(applications),
        "views": total_views(employer),
        "interviews_scheduled": distribution[Application.Status.INTERVIEW.value],
        "hired": distribution[Application.Status.HIRED.value],
        "avg_time_to_hire": avg_time_to_hire(applications, now),
        "conversion_rate": conversion_rate(applications),
        "trends": trends(applications, days, timezone.localdate(now)),
        "job_count": Job.objects.filter(employer=employer).count(),
        "status_distribution": distribution,
    }


def overview(employer, days=None, now=None):
    since = window_start(days, now) if days else None
    applications = employer_applications(employer, since=since)
    return {
        "total_views": total_views(employer),
        "total_applications": len(applications),
        "avg_time_to_hire": avg_time_to_hire(applications, now),
        "conversion_rate": conversion_rate(applications),
    }
