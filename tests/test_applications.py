import csv
import io

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from django.utils import timezone

from jobs.models import Application
from .conftest import BROKEN_PDF_EDITS, broken_pdf

pytestmark = pytest.mark.django_db


def apply(client, job, resume, **extra):
    data = {'resume': resume}
    data.update(extra)
    return client.post(f'/api/jobs/{job.id}/apply', data, format='multipart')


@pytest.fixture
def application(job, seeker, resume_pdf):
    return Application.objects.create(job=job, seeker=seeker, resume=resume_pdf, ats_score=55)


def test_seeker_applies_with_scored_resume(seeker_client, job, seeker, resume_pdf):
    response = apply(seeker_client, job, resume_pdf, cover_letter='Hire me')

    assert response.status_code == 201
    assert response.data['status'] == 'pending'
    assert response.data['job_id'] == job.id
    assert 0 <= response.data['ats_score'] <= 100
    assert response.data['resume_url'].startswith('/uploads/resumes/')
    assert Application.objects.get(seeker=seeker).cover_letter == 'Hire me'


def test_cannot_apply_twice(seeker_client, job, make_resume):
    apply(seeker_client, job, make_resume())
    response = apply(seeker_client, job, make_resume())

    assert response.status_code == 400
    assert response.data['message'] == "You have already applied for this job"
    assert Application.objects.count() == 1


def test_apply_requires_pdf_resume(seeker_client, job):
    missing = seeker_client.post(f'/api/jobs/{job.id}/apply', {'cover_letter': 'hi'}, format='multipart')
    assert missing.status_code == 400
    assert missing.data['message'] == "Resume file is required"

    text_file = SimpleUploadedFile('resume.txt', b'hello', content_type='text/plain')
    response = apply(seeker_client, job, text_file)
    assert response.status_code == 400
    assert response.data['message'] == "Only PDF files are allowed"


def test_apply_rejects_large_resume(seeker_client, job, resume_pdf, settings):
    settings.RESUME_MAX_UPLOAD_SIZE = 10

    response = apply(seeker_client, job, resume_pdf)

    assert response.status_code == 400
    assert response.data['message'].startswith("File too large")


def test_apply_to_missing_job(seeker_client, resume_pdf):
    response = seeker_client.post('/api/jobs/9999/apply', {'resume': resume_pdf}, format='multipart')

    assert response.status_code == 404
    assert response.data['message'] == "Job not found"


def test_employer_cannot_apply(employer_client, job, resume_pdf):
    assert apply(employer_client, job, resume_pdf).status_code == 403


def test_has_applied(seeker_client, job, application):
    assert seeker_client.get(f'/api/jobs/{job.id}/has-applied').data == {'has_applied': True}


def test_has_applied_false(api_client, job, other_seeker):
    api_client.force_authenticate(other_seeker)

    assert api_client.get(f'/api/jobs/{job.id}/has-applied').data == {'has_applied': False}


def test_seeker_lists_own_applications(seeker_client, application):
    response = seeker_client.get('/api/applications/seeker')

    assert response.status_code == 200
    assert [item['id'] for item in response.data] == [application.id]
    assert response.data[0]['job_title'] == 'Backend Engineer'


def test_employer_lists_applications_with_candidate_details(employer_client, application):
    response = employer_client.get('/api/applications/employer')

    assert response.status_code == 200
    item = response.data[0]
    assert item['seeker_name'] == 'jane'
    assert item['job_title'] == 'Backend Engineer'
    assert item['phone_num'] == '+15550001111'


def test_job_filter_shortlists_by_ats_score(employer_client, job, application, other_seeker, resume_pdf):
    weak = Application.objects.create(job=job, seeker=other_seeker, resume=resume_pdf, ats_score=5)

    response = employer_client.get('/api/applications/employer', {'job_id': job.id})

    ids = [item['id'] for item in response.data]
    assert application.id in ids
    assert weak.id not in ids


def test_job_filter_scores_unscored_applications(employer_client, job, seeker, resume_pdf):
    unscored = Application.objects.create(job=job, seeker=seeker, resume=resume_pdf)

    employer_client.get('/api/applications/employer', {'job_id': job.id})

    unscored.refresh_from_db()
    assert unscored.ats_score is not None


@pytest.mark.parametrize('edit', BROKEN_PDF_EDITS)
def test_apply_with_unreadable_pdf_still_scores(seeker_client, job, seeker, edit):
    resume = SimpleUploadedFile('resume.pdf', broken_pdf(edit), content_type='application/pdf')

    response = apply(seeker_client, job, resume)

    assert response.status_code == 201
    assert 0 <= response.data['ats_score'] <= 100


@pytest.mark.parametrize('edit', BROKEN_PDF_EDITS)
def test_job_filter_scores_unreadable_resumes(employer_client, job, seeker, edit):
    resume = SimpleUploadedFile('resume.pdf', broken_pdf(edit), content_type='application/pdf')
    unscored = Application.objects.create(job=job, seeker=seeker, resume=resume)

    response = employer_client.get('/api/applications/employer', {'job_id': job.id})

    assert response.status_code == 200
    unscored.refresh_from_db()
    assert 0 <= unscored.ats_score <= 100


def test_other_employer_sees_nothing(api_client, application, other_employer):
    api_client.force_authenticate(other_employer)

    assert api_client.get('/api/applications/employer').data == []


def test_application_list_filters_by_status(employer_client, application, job, other_seeker, resume_pdf):
    Application.objects.create(job=job, seeker=other_seeker, resume=resume_pdf, status='hired')

    assert len(employer_client.get('/api/applications', {'status': 'all'}).data) == 2
    hired = employer_client.get('/api/applications', {'status': 'hired'}).data
    assert [item['seeker_name'] for item in hired] == ['john']


def test_update_status(employer_client, application):
    response = employer_client.patch(f'/api/applications/{application.id}/status', {'status': 'accepted'}, format='json')

    assert response.status_code == 200
    assert response.data['status'] == 'accepted'
    assert response.data['seeker_name'] == 'jane'


def test_update_status_validation(employer_client, application):
    response = employer_client.patch(f'/api/applications/{application.id}/status', {'status': 'pending'}, format='json')
    assert response.status_code == 400
    assert response.data['message'] == "Invalid status"

    missing = employer_client.patch('/api/applications/9999/status', {'status': 'hired'}, format='json')
    assert missing.status_code == 404


def test_update_status_by_non_owner(api_client, application, other_employer):
    api_client.force_authenticate(other_employer)

    response = api_client.patch(f'/api/applications/{application.id}/status', {'status': 'hired'}, format='json')

    assert response.status_code == 403


def test_schedule_interview(employer_client, application):
    response = employer_client.patch(
        f'/api/applications/{application.id}/schedule',
        {'interview_date': '2030-01-15T10:00:00Z'},
        format='json',
    )

    assert response.status_code == 200
    assert response.data['status'] == 'interview'
    application.refresh_from_db()
    assert application.interview_date.year == 2030


def test_schedule_interview_validation(employer_client, application):
    missing = employer_client.patch(f'/api/applications/{application.id}/schedule', {}, format='json')
    assert missing.data['message'] == "Interview date is required"

    garbage = employer_client.patch(
        f'/api/applications/{application.id}/schedule', {'interview_date': 'soon'}, format='json'
    )
    assert garbage.status_code == 400
    assert garbage.data['message'] == "Invalid interview date"


def test_stats(employer_client, application, job, other_seeker, resume_pdf):
    Application.objects.create(job=job, seeker=other_seeker, resume=resume_pdf, status='interview')
    application.status = 'accepted'
    application.save()

    response = employer_client.get('/api/applications/stats')

    assert response.data == {
        'total_applications': 2,
        'shortlisted': 1,
        'interviews_scheduled': 1,
        'hired': 0,
    }


def test_export_csv(employer_client, application):
    application.interview_date = timezone.now()
    application.save()

    response = employer_client.get('/api/applications/export')

    assert response.status_code == 200
    assert response['Content-Type'].startswith('text/csv')
    assert 'applications.csv' in response['Content-Disposition']
    rows = list(csv.reader(io.StringIO(response.content.decode())))
    assert rows[0] == ['ID', 'Job Title', 'Candidate Name', 'Status', 'Applied At', 'Interview Date']
    assert rows[1][:4] == [str(application.id), 'Backend Engineer', 'jane', 'pending']
    assert rows[1][5] != 'N/A'


def test_export_marks_missing_interview_date(employer_client, application):
    rows = list(csv.reader(io.StringIO(employer_client.get('/api/applications/export').content.decode())))

    assert rows[1][5] == 'N/A'


def test_application_endpoints_require_employer(seeker_client):
    assert seeker_client.get('/api/applications/stats').status_code == 403
    assert seeker_client.get('/api/applications/export').status_code == 403
