import logging

from rest_framework import generics
from rest_framework.exceptions import ValidationError
from rest_framework.parsers import FormParser, MultiPartParser

from users.permissions import IsEmployer
from .models import Subscription
from .serializers import SubscriptionSerializer
from .services import has_pending_subscription, plan_price

logger = logging.getLogger(__name__)


class SubscriptionListCreateView(generics.ListCreateAPIView):
    """
    GET: My subscription submissions.
    POST: Submit a payment screenshot for a plan; waits for admin verification.
    """
    serializer_class = SubscriptionSerializer
    permission_classes = (IsEmployer,)
    parser_classes = (MultiPartParser, FormParser)

    def get_queryset(self):
        return Subscription.objects.filter(user=self.request.user)

    def perform_create(self, serializer):
        if has_pending_subscription(self.request.user):
            raise ValidationError("You already have a subscription awaiting verification")

        plan = serializer.validated_data['plan']
        subscription = serializer.save(user=self.request.user, price=plan_price(plan))
        logger.info("Employer %s submitted %s subscription %s", self.request.user.id, plan, subscription.id)
