import logging

from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from matching.matcher import match_vehicles
from routing.validation import InvalidInputError
from .serializers import CandidateVehicleSerializer, DestinationQuerySerializer
from .snapshot import get_locator_policy, load_snapshot

logger = logging.getLogger(__name__)


class MatchVehiclesView(APIView):
    """
    POST /api/v1/match/
    Body: {"origin": [lat, lon], "destination": [lat, lon], "radius_m": 200, "include_taxis": true}
    Returns {"count": n, "candidates": [...]}, ranked. Malformed input -> 400 keyed by field name.
    """
    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    def post(self, request):
        serializer = DestinationQuerySerializer(data=request.data)
        if not serializer.is_valid():
            logger.info("Rejected match query: %s", serializer.errors)
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            query = serializer.to_query()
        except InvalidInputError as exc:
            logger.info("Rejected match query: %s", exc)
            return Response({exc.field: [exc.message]}, status=status.HTTP_400_BAD_REQUEST)

        catalog, fleet = load_snapshot()
        candidates = match_vehicles(query, catalog, fleet, locator_policy=get_locator_policy())

        return Response({
            'count': len(candidates),
            'candidates': CandidateVehicleSerializer(candidates, many=True).data,
        })
