import logging

import requests
from django.conf import settings

logger = logging.getLogger(__name__)


class SMSError(Exception):
    pass


class TwilioClient:
    """
    Minimal Twilio Messages API client. Without credentials it only logs
    the message and reports it as simulated.
    """
    timeout = 10

    def __init__(self):
        self.account_sid = getattr(settings, "TWILIO_ACCOUNT_SID", "")
        self.auth_token = getattr(settings, "TWILIO_AUTH_TOKEN", "")
        self.from_number = getattr(settings, "TWILIO_FROM_NUMBER", "")
        self.base_url = getattr(settings, "TWILIO_BASE_URL", "https://api.twilio.com/2010-04-01")

    @property
    def is_configured(self):
        return bool(self.account_sid and self.auth_token and self.from_number)

    def send(self, to, body):
        """
        Returns {"sid", "to", "status"}; raises SMSError when Twilio refuses.
        """
        if not self.is_configured:
            logger.info("Simulating SMS to %s: %s", to, body)
            return {"sid": None, "to": to, "status": "simulated"}

        url = f"{self.base_url}/Accounts/{self.account_sid}/Messages.json"
        data = {"To": to, "From": self.from_number, "Body": body}
        try:
            response = requests.post(url, data=data, auth=(self.account_sid, self.auth_token), timeout=self.timeout)
        except requests.RequestException as exc:
            raise SMSError(f"Twilio request failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError:
            payload = {}
        if response.status_code >= 400:
            raise SMSError(payload.get("message") or f"Twilio error {response.status_code}")

        return {"sid": payload.get("sid"), "to": to, "status": "sent"}
