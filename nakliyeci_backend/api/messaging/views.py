from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from api.accounts.services import get_user_profile
from common.permissions import IsAdmin, IsFirebaseUser
from common.responses import not_found

from . import services
from .serializers import MessageSerializer


@extend_schema(tags=["messages"])
class MessageListView(APIView):
    def get_permissions(self):
        if self.request.method == "POST":
            return [IsFirebaseUser()]
        return [IsAdmin()]

    def get(self, request):
        messages = services.get_all_messages()
        return Response(
            {
                "results": MessageSerializer(messages, many=True).data,
                "unread": services.count_unread_messages(),
            }
        )

    @extend_schema(request=MessageSerializer)
    def post(self, request):
        s = MessageSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        profile = get_user_profile(request.user.uid)
        message = services.add_message(
            request.user.uid if profile else None,
            profile.display_name if profile else "",
            s.validated_data["title"],
            s.validated_data["content"],
        )
        if message is None:
            return Response(
                {"detail": "Mesaj gönderilirken bir hata oluştu."},
                status=status.HTTP_400_BAD_REQUEST,
            )
        return Response(MessageSerializer(message).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=["messages"])
class MessageReadView(APIView):
    permission_classes = [IsAdmin]

    def post(self, request, pk):
        if not services.mark_message_as_read(pk):
            return not_found("Mesaj bulunamadı.")
        return Response({"success": True})


@extend_schema(tags=["messages"])
class MessageDetailView(APIView):
    permission_classes = [IsAdmin]

    def delete(self, request, pk):
        if not services.delete_message(pk):
            return not_found("Mesaj bulunamadı.")
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=["messages"])
class UnreadCountView(APIView):
    permission_classes = [IsAdmin]

    def get(self, request):
        return Response({"unread": services.count_unread_messages()})
