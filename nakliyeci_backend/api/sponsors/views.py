from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from api.accounts.serializers import CompanyCardSerializer
from common.permissions import IsAdmin
from common.responses import mutation_response

from . import services
from .serializers import (
    CompanySponsorshipsSerializer,
    SponsorSerializer,
    SponsorshipBatchSerializer,
)


@extend_schema(tags=["sponsors"])
class SponsoredCompaniesView(APIView):
    """Sponsor firmalar: ülke sponsorları ve şehir sponsorları ayrı gruplarda."""

    def get(self, request):
        groups = services.get_sponsored_companies()
        return Response(
            {key: CompanyCardSerializer(companies, many=True).data for key, companies in groups.items()}
        )


# ===================== Yönetici =====================


@extend_schema(tags=["admin-sponsors"])
class AdminSponsorListView(APIView):
    permission_classes = [IsAdmin]

    def get(self, request):
        return Response(SponsorSerializer(services.get_all_sponsors(), many=True).data)

    @extend_schema(request=SponsorshipBatchSerializer)
    def post(self, request):
        s = SponsorshipBatchSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        result = services.add_sponsorships_batch(**s.validated_data)
        code = status.HTTP_201_CREATED if result.added_count else status.HTTP_200_OK
        return mutation_response(result, success_status=code)


@extend_schema(tags=["admin-sponsors"])
class AdminSponsorDetailView(APIView):
    permission_classes = [IsAdmin]

    @extend_schema(request=SponsorSerializer)
    def patch(self, request, pk):
        s = SponsorSerializer(data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        return mutation_response(services.update_sponsor(pk, s.validated_data))

    def delete(self, request, pk):
        if not services.delete_sponsor(pk):
            return Response({"detail": "Sponsorluk bulunamadı."}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=["admin-sponsors"])
class AdminCompanySponsorshipsView(APIView):
    permission_classes = [IsAdmin]

    def get(self, request, company_id):
        return Response(
            SponsorSerializer(services.get_sponsors_by_company(company_id), many=True).data
        )

    @extend_schema(request=CompanySponsorshipsSerializer)
    def put(self, request, company_id):
        s = CompanySponsorshipsSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        return mutation_response(
            services.set_company_sponsorships(company_id, s.validated_data["locations"])
        )
