from rest_framework.response import Response
from rest_framework.views import APIView

from users.permissions import IsEmployer
from . import services


class AnalyticsView(APIView):
    """
    Hiring dashboard over the last ?days= (default 30).
    """
    permission_classes = (IsEmployer,)

    def get(self, request):
        days = services.parse_days(request.query_params.get('days'))
        return Response(services.dashboard(request.user, days))


class AnalyticsOverviewView(APIView):
    permission_classes = (IsEmployer,)

    def get(self, request):
        raw_days = request.query_params.get('days')
        days = services.parse_days(raw_days) if raw_days else None
        return Response(services.overview(request.user, days))


class AnalyticsTrendsView(APIView):
    permission_classes = (IsEmployer,)

    def get(self, request):
        days = services.parse_days(request.query_params.get('days'))
        applications = services.employer_applications(request.user, since=services.window_start(days))
        return Response(services.trends(applications, days))
