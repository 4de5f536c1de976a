from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
import logging

from .middleware import track
from .serializers import TrackEventSerializer

logger = logging.getLogger(__name__)


def get_http_request(request):
    """
    Return the Django HttpRequest behind a DRF Request.

    MixpanelMiddleware sets do_not_track on the HttpRequest, and track() writes
    request.analytics there too. Attributes set on the DRF wrapper would not be
    seen by the middleware or by anything reading the HttpRequest afterwards.
    """
    return request._request


def _tracked_count(request):
    return len(getattr(request, 'analytics', {}).get('tracked_events', []))


class TrackEventAPIView(APIView):
    """
    Record an event sent by a front-end, with the context of this request.
    """
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request, *args, **kwargs):
        serializer = TrackEventSerializer(data=request.data)
        if not serializer.is_valid():
            logger.warning("Invalid track event data: %s", serializer.errors)
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        http_request = get_http_request(request)
        before = _tracked_count(http_request)
        track(http_request, serializer.validated_data['event'], serializer.validated_data['properties'])

        tracked = _tracked_count(http_request) > before
        return Response({"tracked": tracked}, status=status.HTTP_202_ACCEPTED)
