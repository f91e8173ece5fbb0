from rest_framework import generics
from rest_framework.response import Response
from rest_framework.views import APIView

from finance.models import Subscription
from finance.serializers import AdminSubscriptionSerializer, SubscriptionVerifySerializer
from finance.services import verify_subscription
from users.permissions import IsPlatformAdmin

# --- SUBSCRIPTION PAYMENTS ---

class AdminSubscriptionListView(generics.ListAPIView):
    """Every payment submission, optionally narrowed by ?status="""
    serializer_class = AdminSubscriptionSerializer
    permission_classes = (IsPlatformAdmin,)

    def get_queryset(self):
        subscriptions = Subscription.objects.select_related('user').order_by('-created_at')
        status_filter = self.request.query_params.get('status')
        if status_filter and status_filter != 'all':
            subscriptions = subscriptions.filter(status=status_filter)
        return subscriptions


class AdminVerifySubscriptionView(APIView):
    """Approve or reject a payment screenshot"""
    permission_classes = (IsPlatformAdmin,)

    def patch(self, request, pk):
        serializer = SubscriptionVerifySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        subscription = verify_subscription(pk, serializer.validated_data['status'], request.user)
        return Response(AdminSubscriptionSerializer(subscription).data)
