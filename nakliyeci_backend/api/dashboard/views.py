from drf_spectacular.utils import extend_schema, inline_serializer
from rest_framework import serializers, status
from rest_framework.response import Response
from rest_framework.views import APIView

from api.accounts.serializers import ProfileSerializer
from common.permissions import IsAdmin

from .services import get_dashboard_stats

COUNTERS = (
    "companies",
    "pending_companies",
    "active_listings",
    "listings_last_7_days",
    "membership_requests",
    "new_membership_requests",
    "messages",
    "unread_messages",
)


@extend_schema(
    tags=["dashboard"],
    responses=inline_serializer(
        "DashboardStats",
        {
            **{name: serializers.IntegerField() for name in COUNTERS},
            "recent_companies": serializers.ListField(child=serializers.DictField()),
        },
    ),
)
class DashboardView(APIView):
    permission_classes = [IsAdmin]

    def get(self, request):
        stats = get_dashboard_stats()
        if stats is None:
            return Response(
                {"detail": "Panel verileri yüklenemedi."},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )
        stats["recent_companies"] = ProfileSerializer(stats["recent_companies"], many=True).data
        return Response(stats)
