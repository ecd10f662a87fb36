"""HTTP handlers for calendar ads - handle HTTP concerns only."""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from ads.handlers.serializers import AdSerializer, PlacementRequestSerializer
from ads.services.ad_service import AdService
from ads.services.factory import get_ad_service


class AdServiceView(APIView):
    def get_service(self) -> AdService:
        return get_ad_service()


class AdPlacementView(AdServiceView):
    """Handler for POST /api/ads/placements"""

    def post(self, request: Request) -> Response:
        serializer = PlacementRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        ads = self.get_service().place_ads(
            event_count=serializer.validated_data["event_count"],
            user_interests=serializer.validated_data["user_interests"],
        )
        return Response(AdSerializer(ads, many=True).data)


class AdViewTrackingView(AdServiceView):
    """Handler for POST /api/ads/{ad_id}/views"""

    def post(self, request: Request, ad_id: str) -> Response:
        self.get_service().track_view(ad_id)
        return Response(status=status.HTTP_202_ACCEPTED)
