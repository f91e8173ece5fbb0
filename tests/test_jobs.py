import pytest

from jobs.models import Job, JobView

pytestmark = pytest.mark.django_db


def job_payload(**overrides):
    payload = {
        'title': 'Data Analyst',
        'description': 'Analyse marketing data.',
        'location': 'Abuja',
        'salary': '$60,000',
        'job_type': 'full-time',
        'requirements': ['sql'],
        'skills': ['SQL', 'Excel'],
        'experience_level': 'entry',
    }
    payload.update(overrides)
    return payload


def test_employer_posts_job_with_default_company(employer_client, employer):
    response = employer_client.post('/api/jobs', job_payload(), format='json')

    assert response.status_code == 201
    assert response.data['company'] == 'Acme Corp'
    assert response.data['employer_id'] == employer.id
    assert response.data['views'] == 0
    assert response.data['applicants_count'] == 0


def test_posting_requires_company_when_profile_has_none(api_client, employer):
    employer.company_name = None
    employer.save()
    api_client.force_authenticate(employer)

    response = api_client.post('/api/jobs', job_payload(), format='json')

    assert response.status_code == 400
    assert 'company' in response.data['errors']


def test_seeker_cannot_post_job(seeker_client):
    assert seeker_client.post('/api/jobs', job_payload(), format='json').status_code == 403


def test_anonymous_cannot_post_job(api_client):
    assert api_client.post('/api/jobs', job_payload(), format='json').status_code == 401


def test_invalid_job_type_is_rejected(employer_client):
    response = employer_client.post('/api/jobs', job_payload(job_type='gig'), format='json')

    assert response.status_code == 400
    assert 'job_type' in response.data['errors']


def test_job_list_is_public_and_newest_first(api_client, job, employer):
    newer = Job.objects.create(
        employer=employer, title='Designer', description='UI work', company='Acme Corp',
        location='Remote', salary='Negotiable', job_type='contract',
    )

    response = api_client.get('/api/jobs')

    assert response.status_code == 200
    assert [item['id'] for item in response.data] == [newer.id, job.id]


def test_job_detail_and_missing_job(api_client, job):
    assert api_client.get(f'/api/jobs/{job.id}').data['title'] == 'Backend Engineer'
    assert api_client.get('/api/jobs/9999').status_code == 404


def test_only_owner_can_update_or_delete(api_client, job, other_employer):
    api_client.force_authenticate(other_employer)

    assert api_client.patch(f'/api/jobs/{job.id}', {'title': 'Hijacked'}, format='json').status_code == 403
    assert api_client.delete(f'/api/jobs/{job.id}').status_code == 403
    assert Job.objects.filter(pk=job.id, title='Backend Engineer').exists()


def test_owner_updates_and_deletes(employer_client, job):
    response = employer_client.patch(f'/api/jobs/{job.id}', {'remote': True}, format='json')
    assert response.status_code == 200
    assert response.data['remote'] is True

    assert employer_client.delete(f'/api/jobs/{job.id}').status_code == 204
    assert not Job.objects.filter(pk=job.id).exists()


def test_view_is_counted_once_per_user(api_client, job, seeker):
    api_client.force_authenticate(seeker)
    api_client.post(f'/api/jobs/{job.id}/view')
    response = api_client.post(f'/api/jobs/{job.id}/view')

    assert response.status_code == 200
    assert response.data == {"message": "View recorded", "views": 1}
    assert JobView.objects.filter(job=job).count() == 1
    assert api_client.get(f'/api/jobs/{job.id}').data['views'] == 1


def test_anonymous_view_is_not_recorded(api_client, job):
    response = api_client.post(f'/api/jobs/{job.id}/view')

    assert response.status_code == 200
    assert response.data['views'] == 0


def test_view_of_missing_job(api_client):
    response = api_client.post('/api/jobs/9999/view')

    assert response.status_code == 404
    assert response.data['message'] == "Job not found"
