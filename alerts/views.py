from rest_framework import generics
from rest_framework.response import Response

from jobs.serializers import JobSerializer
from users.permissions import IsSeeker
from .models import JobAlert
from .serializers import JobAlertSerializer
from .services import matching_jobs


class SeekerAlertMixin:
    serializer_class = JobAlertSerializer
    permission_classes = (IsSeeker,)

    def get_queryset(self):
        # Other users' alerts are invisible, so they 404
        return JobAlert.objects.filter(user=self.request.user)


class JobAlertListView(SeekerAlertMixin, generics.ListCreateAPIView):
    def perform_create(self, serializer):
        serializer.save(user=self.request.user)


class JobAlertDetailView(SeekerAlertMixin, generics.RetrieveUpdateDestroyAPIView):
    http_method_names = ['get', 'patch', 'delete', 'head', 'options']


class JobAlertMatchesView(SeekerAlertMixin, generics.GenericAPIView):
    """
    Jobs matching the alert right now.
    """
    def get(self, request, pk):
        alert = self.get_object()
        return Response(JobSerializer(matching_jobs(alert), many=True).data)
