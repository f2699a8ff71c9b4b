from django.conf import settings
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from api.accounts.services import get_user_profile
from common.permissions import IsAdmin, IsFirebaseUser, IsOwnerOrAdmin
from common.responses import filter_params, not_found, page_params, page_response

from . import services
from .serializers import FreightCreateSerializer, FreightSerializer, freight_serializer_for

FILTER_NAMES = (
    "freight_type",
    "origin_city",
    "destination_city",
    "vehicle_needed",
    "shipment_scope",
    "is_continuous_load",
    "posted_today",
    "sort_by",
)


@extend_schema(tags=["listings"])
class ListingListView(APIView):
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
        page_size, cursor = page_params(request, settings.LISTING_PAGE_SIZE)
        page = services.get_listings(filter_params(request, FILTER_NAMES), page_size, cursor)
        return page_response(page, FreightSerializer)

    @extend_schema(request=FreightCreateSerializer)
    def post(self, request):
        profile = get_user_profile(request.user.uid)
        if profile is None:
            return Response(
                {"detail": "İlan vermek için önce profil oluşturmalısınız."},
                status=status.HTTP_400_BAD_REQUEST,
            )
        s = FreightCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        data = s.validated_data
        data.setdefault("posted_by", profile.display_name)
        data["company_name"] = data.get("company_name") or profile.display_name
        listing = services.add_listing(profile.pk, data)
        if listing is None:
            return Response(
                {"detail": "İlan eklenirken bir hata oluştu."}, status=status.HTTP_400_BAD_REQUEST
            )
        return Response(FreightSerializer(listing).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=["listings"])
class MyListingsView(APIView):
    permission_classes = [IsFirebaseUser]

    def get(self, request):
        listings = services.get_listings_by_user_id(request.user.uid)
        return Response(FreightSerializer(listings, many=True).data)


@extend_schema(tags=["listings"])
class ListingDetailView(APIView):
    def get_permissions(self):
        if self.request.method == "GET":
            return []
        return [IsOwnerOrAdmin()]

    def get(self, request, pk):
        listing = services.get_listing_by_id(pk)
        if listing is None:
            return not_found("İlan bulunamadı.")
        if not listing.is_active:
            user = request.user
            owner = getattr(user, "uid", None) == listing.user_id
            if not (owner or getattr(user, "is_admin", False)):
                return not_found("İlan bulunamadı.")
        return Response(FreightSerializer(listing).data)

    def patch(self, request, pk):
        listing = services.get_listing_by_id(pk)
        if listing is None:
            return not_found("İlan bulunamadı.")
        self.check_object_permissions(request, listing)
        s = freight_serializer_for(listing.freight_type)(listing, data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        if not services.update_listing(pk, s.validated_data):
            return Response(
                {"detail": "İlan güncellenemedi."}, status=status.HTTP_400_BAD_REQUEST
            )
        return Response(FreightSerializer(services.get_listing_by_id(pk)).data)

    def delete(self, request, pk):
        listing = services.get_listing_by_id(pk)
        if listing is None:
            return not_found("İlan bulunamadı.")
        self.check_object_permissions(request, listing)
        if not services.delete_listing(pk):
            return Response({"detail": "İlan silinemedi."}, status=status.HTTP_400_BAD_REQUEST)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=["listings"])
class AdminListingListView(APIView):
    permission_classes = [IsAdmin]

    def get(self, request):
        return Response(FreightSerializer(services.get_all_listings_for_admin(), many=True).data)
