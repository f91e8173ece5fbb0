from datetime import timedelta

import pytest
from django.utils import timezone

from analytics import services
from jobs.models import Application, JobView

pytestmark = pytest.mark.django_db


@pytest.fixture
def history(job, seeker, other_seeker, resume_pdf):
    now = timezone.now()
    hired = Application.objects.create(
        job=job, seeker=seeker, resume=resume_pdf, status='hired',
        applied_at=now - timedelta(days=10), interview_date=now - timedelta(days=6),
    )
    recent = Application.objects.create(job=job, seeker=other_seeker, resume=resume_pdf, applied_at=now)
    JobView.objects.create(job=job, user=seeker)
    JobView.objects.create(job=job, user=other_seeker)
    return hired, recent


def test_parse_days_falls_back_to_default():
    assert services.parse_days('7') == 7
    assert services.parse_days('abc') == 30
    assert services.parse_days('-3') == 30
    assert services.parse_days(None) == 30


def test_conversion_rate_and_time_to_hire(history):
    applications = list(Application.objects.all())

    assert services.conversion_rate(applications) == 50.0
    assert services.avg_time_to_hire(applications) == 4
    assert services.conversion_rate([]) == 0
    assert services.avg_time_to_hire([]) == 0


def test_trends_cover_each_day_ending_today():
    today = timezone.localdate()

    trend = services.trends([], 3, today=today)

    assert [point['date'] for point in trend] == [
        (today - timedelta(days=2)).isoformat(),
        (today - timedelta(days=1)).isoformat(),
        today.isoformat(),
    ]
    assert all(point['applications'] == 0 for point in trend)


def test_dashboard(employer_client, history):
    response = employer_client.get('/api/analytics', {'days': 30})

    assert response.status_code == 200
    data = response.data
    assert data['total_applications'] == 2
    assert data['views'] == 2
    assert data['hired'] == 1
    assert data['interviews_scheduled'] == 0
    assert data['conversion_rate'] == 50.0
    assert data['job_count'] == 1
    assert data['status_distribution']['pending'] == 1
    assert len(data['trends']) == 30
    assert data['trends'][-1]['applications'] == 1


def test_dashboard_window_excludes_older_applications(employer_client, history):
    data = employer_client.get('/api/analytics', {'days': 5}).data

    assert data['total_applications'] == 1
    assert data['hired'] == 0
    assert data['conversion_rate'] == 0


def test_overview_is_all_time_by_default(employer_client, history):
    response = employer_client.get('/api/analytics/overview')

    assert response.data == {
        'total_views': 2,
        'total_applications': 2,
        'avg_time_to_hire': 4,
        'conversion_rate': 50.0,
    }


def test_trends_endpoint(employer_client, history):
    response = employer_client.get('/api/analytics/trends', {'days': 'bogus'})

    assert len(response.data) == 30
    assert sum(point['applications'] for point in response.data) == 2


def test_analytics_is_employer_only(seeker_client):
    assert seeker_client.get('/api/analytics').status_code == 403


def test_analytics_requires_login(api_client):
    assert api_client.get('/api/analytics/overview').status_code == 401
