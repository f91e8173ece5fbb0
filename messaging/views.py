from rest_framework.response import Response
from rest_framework.views import APIView

from users.permissions import IsEmployer
from .serializers import SendSMSSerializer
from .services import notify_shortlisted


class SendShortlistSMSView(APIView):
    """
    Text the accepted applicants of my jobs (optionally one job).
    """
    permission_classes = (IsEmployer,)

    def post(self, request):
        serializer = SendSMSSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        results = notify_shortlisted(request.user, serializer.validated_data.get('job_id'))
        return Response({
            "message": f"SMS sent to {len(results)} accepted applicants",
            "results": results,
        })
