import logging

from rest_framework.exceptions import NotFound, ValidationError

from jobs.services import accepted_applications
from .models import OutboundMessage
from .sms import SMSError, TwilioClient

logger = logging.getLogger(__name__)


def shortlist_message(application):
    return f"Dear {application.seeker.username}, you have been shortlisted for {application.job.title}."


def notify_shortlisted(employer, job_id=None, client=None):
    """
    Texts every accepted applicant of the employer's jobs that has a phone
    number. Returns one result per message.
    """
    applications = list(accepted_applications(employer, job_id))
    if not applications:
        raise NotFound("No accepted applicants found")

    reachable = [app for app in applications if app.seeker.phone]
    if not reachable:
        raise ValidationError("No accepted applicants have phone numbers")

    client = client or TwilioClient()
    results = []
    for application in reachable:
        message = OutboundMessage(
            sender=employer,
            application=application,
            to_number=application.seeker.phone,
            body=shortlist_message(application),
        )
        try:
            outcome = client.send(message.to_number, message.body)
        except SMSError as exc:
            logger.error("SMS to %s for application %s failed: %s", message.to_number, application.id, exc)
            message.status = OutboundMessage.Status.FAILED
            message.error_message = str(exc)
        else:
            message.status = outcome["status"]
            message.provider_sid = outcome["sid"]
        message.save()
        results.append({
            "application_id": application.id,
            "to": message.to_number,
            "status": message.status,
            "sid": message.provider_sid,
        })
    return results
