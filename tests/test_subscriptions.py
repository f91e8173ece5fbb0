import pytest

from finance.models import Subscription

pytestmark = pytest.mark.django_db


@pytest.fixture
def pending(employer, image_file):
    return Subscription.objects.create(
        user=employer, plan='professional', price=4900, screenshot=image_file('proof.png'),
    )


def test_employer_submits_payment_proof(employer_client, image_file):
    response = employer_client.post(
        '/api/subscriptions', {'plan': 'enterprise', 'screenshot': image_file('proof.png')}, format='multipart'
    )

    assert response.status_code == 201
    assert response.data['status'] == 'pending'
    assert response.data['price'] == 19900
    assert response.data['screenshot_url'].startswith('/uploads/payment_screenshots/')


def test_second_pending_submission_is_refused(employer_client, pending, image_file):
    response = employer_client.post(
        '/api/subscriptions', {'plan': 'enterprise', 'screenshot': image_file()}, format='multipart'
    )

    assert response.status_code == 400
    assert response.data['message'] == "You already have a subscription awaiting verification"


def test_invalid_plan(employer_client, image_file):
    response = employer_client.post(
        '/api/subscriptions', {'plan': 'platinum', 'screenshot': image_file()}, format='multipart'
    )

    assert response.status_code == 400
    assert response.data['message'] == "Invalid plan"


def test_screenshot_is_required(employer_client):
    response = employer_client.post('/api/subscriptions', {'plan': 'professional'}, format='multipart')

    assert response.status_code == 400
    assert response.data['message'] == "Payment screenshot is required"


def test_employer_lists_own_subscriptions(employer_client, pending):
    response = employer_client.get('/api/subscriptions')

    assert [item['id'] for item in response.data] == [pending.id]


def test_seeker_cannot_subscribe(seeker_client):
    assert seeker_client.get('/api/subscriptions').status_code == 403


def test_admin_lists_submissions(admin_client, pending):
    response = admin_client.get('/api/admin/subscriptions', {'status': 'pending'})

    assert response.status_code == 200
    item = response.data[0]
    assert item['username'] == 'acme'
    assert item['email'] == 'hr@acme.com'
    assert item['screenshot_url']

    assert admin_client.get('/api/admin/subscriptions', {'status': 'active'}).data == []


def test_admin_activates_subscription(admin_client, admin_user, pending, employer):
    assert employer.current_plan == 'free'

    response = admin_client.patch(f'/api/admin/subscriptions/{pending.id}/verify', {'status': 'active'}, format='json')

    assert response.status_code == 200
    assert response.data['status'] == 'active'
    assert response.data['verified_by'] == admin_user.id
    employer.refresh_from_db()
    assert employer.current_plan == 'professional'


def test_admin_verify_validation(admin_client, pending):
    bad = admin_client.patch(f'/api/admin/subscriptions/{pending.id}/verify', {'status': 'pending'}, format='json')
    assert bad.status_code == 400
    assert bad.data['message'] == "Invalid status"

    missing = admin_client.patch('/api/admin/subscriptions/9999/verify', {'status': 'active'}, format='json')
    assert missing.status_code == 404


def test_admin_endpoints_require_admin(employer_client, pending):
    assert employer_client.get('/api/admin/subscriptions').status_code == 403
    assert employer_client.patch(
        f'/api/admin/subscriptions/{pending.id}/verify', {'status': 'active'}, format='json'
    ).status_code == 403
