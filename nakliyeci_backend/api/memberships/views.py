from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from api.accounts.services import get_user_profile
from common.permissions import IsAdmin
from common.responses import mutation_response, not_found

from . import services
from .serializers import MembershipRequestSerializer, RequestStatusSerializer


@extend_schema(tags=["membership-requests"])
class MembershipRequestListView(APIView):
    def get_permissions(self):
        if self.request.method == "POST":
            return []
        return [IsAdmin()]

    def get(self, request):
        return Response(
            MembershipRequestSerializer(services.get_all_membership_requests(), many=True).data
        )

    @extend_schema(request=MembershipRequestSerializer)
    def post(self, request):
        s = MembershipRequestSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        uid = getattr(request.user, "uid", None)
        user_id = uid if uid and get_user_profile(uid) else None
        membership_request, error = services.add_membership_request(s.validated_data, user_id)
        if error:
            return Response({"detail": error}, status=status.HTTP_400_BAD_REQUEST)
        return Response(
            {
                "success": True,
                "message": "Talep başarıyla oluşturuldu.",
                "request": MembershipRequestSerializer(membership_request).data,
            },
            status=status.HTTP_201_CREATED,
        )


@extend_schema(tags=["membership-requests"])
class MembershipRequestDetailView(APIView):
    permission_classes = [IsAdmin]

    @extend_schema(request=RequestStatusSerializer)
    def patch(self, request, pk):
        s = RequestStatusSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        return mutation_response(
            services.update_membership_request_status(pk, s.validated_data["status"])
        )

    def delete(self, request, pk):
        if not services.delete_membership_request(pk):
            return not_found("Talep bulunamadı.")
        return Response(status=status.HTTP_204_NO_CONTENT)
