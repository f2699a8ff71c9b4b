from django.conf import settings
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from api.accounts.services import get_user_profile
from common.permissions import IsFirebaseUser, IsOwnerOrAdmin
from common.responses import filter_params, not_found, page_params, page_response

from . import services
from .serializers import TransportOfferSerializer

FILTER_NAMES = ("origin_city", "destination_city", "vehicle_type")


@extend_schema(tags=["transport-offers"])
class TransportOfferListView(APIView):
    def get_permissions(self):
        if self.request.method == "POST":
            return [IsFirebaseUser()]
        return []

    @extend_schema(
        parameters=[
            *(OpenApiParameter(n, str, required=False) for n in FILTER_NAMES),
            OpenApiParameter("page_size", int, required=False),
            OpenApiParameter("cursor", str, required=False),
        ]
    )
    def get(self, request):
        page_size, cursor = page_params(request, settings.OFFER_PAGE_SIZE)
        page = services.get_active_transport_offers(
            filter_params(request, FILTER_NAMES), page_size, cursor
        )
        return page_response(page, TransportOfferSerializer)

    @extend_schema(request=TransportOfferSerializer)
    def post(self, request):
        profile = get_user_profile(request.user.uid)
        if profile is None:
            return Response(
                {"detail": "Teklif vermek için önce profil oluşturmalısınız."},
                status=status.HTTP_400_BAD_REQUEST,
            )
        s = TransportOfferSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        offer = services.add_transport_offer(profile.pk, profile.display_name, s.validated_data)
        if offer is None:
            return Response(
                {"detail": "Teklif eklenirken bir hata oluştu."}, status=status.HTTP_400_BAD_REQUEST
            )
        return Response(TransportOfferSerializer(offer).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=["transport-offers"])
class MyTransportOffersView(APIView):
    permission_classes = [IsFirebaseUser]

    def get(self, request):
        offers, error = services.get_transport_offers_by_user_id(request.user.uid)
        return Response(
            {
                "results": TransportOfferSerializer(offers, many=True).data,
                "error": error.as_dict() if error else None,
            }
        )


@extend_schema(tags=["transport-offers"])
class TransportOfferDetailView(APIView):
    permission_classes = [IsOwnerOrAdmin]

    def _get(self, request, pk):
        offer = services.get_transport_offer_by_id(pk)
        if offer is not None:
            self.check_object_permissions(request, offer)
        return offer

    def get(self, request, pk):
        offer = self._get(request, pk)
        if offer is None:
            return not_found("Teklif bulunamadı.")
        return Response(TransportOfferSerializer(offer).data)

    @extend_schema(request=TransportOfferSerializer)
    def patch(self, request, pk):
        offer = self._get(request, pk)
        if offer is None:
            return not_found("Teklif bulunamadı.")
        s = TransportOfferSerializer(offer, data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        if not services.update_transport_offer(pk, s.validated_data):
            return Response({"detail": "Teklif güncellenemedi."}, status=status.HTTP_400_BAD_REQUEST)
        return Response(TransportOfferSerializer(services.get_transport_offer_by_id(pk)).data)

    def delete(self, request, pk):
        offer = self._get(request, pk)
        if offer is None:
            return not_found("Teklif bulunamadı.")
        if not services.delete_transport_offer(pk):
            return Response({"detail": "Teklif silinemedi."}, status=status.HTTP_400_BAD_REQUEST)
        return Response(status=status.HTTP_204_NO_CONTENT)
