import logging

from django.conf import settings
from django.db import transaction
from django.utils import timezone
from rest_framework.exceptions import NotFound

from .models import Subscription

logger = logging.getLogger(__name__)


def plan_price(plan):
    """Price in cents for a plan."""
    return int(settings.SUBSCRIPTION_PRICES.get(plan, 0))


def has_pending_subscription(user):
    return Subscription.objects.filter(user=user, status=Subscription.Status.PENDING).exists()


@transaction.atomic
def verify_subscription(subscription_id, new_status, admin):
    """
    Admin decision on a submitted payment. An active subscription becomes
    the user's current plan.
    """
    try:
        subscription = Subscription.objects.select_for_update().get(pk=subscription_id)
    except Subscription.DoesNotExist:
        raise NotFound("Subscription not found")

    subscription.status = new_status
    subscription.verified_by = admin
    subscription.verified_at = timezone.now()
    subscription.save(update_fields=['status', 'verified_by', 'verified_at', 'updated_at'])

    logger.info(
        "Admin %s marked subscription %s (%s, user %s) as %s",
        admin.id, subscription.id, subscription.plan, subscription.user_id, new_status,
    )
    return subscription
