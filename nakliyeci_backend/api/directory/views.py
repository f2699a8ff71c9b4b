from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from common.permissions import IsAdmin
from common.responses import mutation_response, not_found

from . import services
from .models import NoteType
from .serializers import CompanyNoteSerializer, ConvertContactSerializer, DirectoryContactSerializer


# ===================== Rehber =====================


@extend_schema(tags=["directory"])
class ContactListView(APIView):
    permission_classes = [IsAdmin]

    def get(self, request):
        return Response(
            DirectoryContactSerializer(services.get_all_directory_contacts(), many=True).data
        )

    @extend_schema(request=DirectoryContactSerializer)
    def post(self, request):
        s = DirectoryContactSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        contact = services.add_directory_contact(s.validated_data)
        if contact is None:
            return Response(
                {"detail": "Rehber kaydı eklenemedi."}, status=status.HTTP_400_BAD_REQUEST
            )
        return Response(DirectoryContactSerializer(contact).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=["directory"])
class ContactDetailView(APIView):
    permission_classes = [IsAdmin]

    def get(self, request, pk):
        contact = services.get_directory_contact(pk)
        if contact is None:
            return not_found("Rehber kaydı bulunamadı.")
        return Response(DirectoryContactSerializer(contact).data)

    @extend_schema(request=DirectoryContactSerializer)
    def patch(self, request, pk):
        s = DirectoryContactSerializer(data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        if not services.update_directory_contact(pk, s.validated_data):
            return not_found("Rehber kaydı bulunamadı.")
        return Response(DirectoryContactSerializer(services.get_directory_contact(pk)).data)

    def delete(self, request, pk):
        if not services.delete_directory_contact(pk):
            return not_found("Rehber kaydı bulunamadı.")
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=["directory"], request=ConvertContactSerializer)
class ContactConvertView(APIView):
    permission_classes = [IsAdmin]

    def post(self, request, pk):
        s = ConvertContactSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        return mutation_response(
            services.convert_contact_to_company(pk, s.validated_data["company_id"])
        )


# ===================== Notlar =====================


class NoteOwnerMixin:
    """URL'deki sahibe (firma ya da rehber kaydı) göre servis argümanları."""

    owner_kwarg = None

    def owner(self, kwargs) -> dict:
        return {self.owner_kwarg: kwargs[self.owner_kwarg]}


@extend_schema(
    tags=["notes"],
    parameters=[OpenApiParameter("type", str, required=False, enum=NoteType.values)],
)
class NoteListView(NoteOwnerMixin, APIView):
    permission_classes = [IsAdmin]

    def get(self, request, **kwargs):
        note_type = request.query_params.get("type") or None
        if note_type and note_type not in NoteType.values:
            return Response({"detail": "Geçersiz not türü."}, status=status.HTTP_400_BAD_REQUEST)
        notes = services.get_notes(note_type=note_type, **self.owner(kwargs))
        return Response(CompanyNoteSerializer(notes, many=True).data)

    @extend_schema(request=CompanyNoteSerializer)
    def post(self, request, **kwargs):
        s = CompanyNoteSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        note = services.add_note(s.validated_data, **self.owner(kwargs))
        if note is None:
            return Response({"detail": "Not eklenemedi."}, status=status.HTTP_400_BAD_REQUEST)
        return Response(CompanyNoteSerializer(note).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=["notes"])
class NoteDetailView(NoteOwnerMixin, APIView):
    permission_classes = [IsAdmin]

    @extend_schema(request=CompanyNoteSerializer)
    def patch(self, request, note_id, **kwargs):
        s = CompanyNoteSerializer(data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        if not services.update_note(note_id, s.validated_data, **self.owner(kwargs)):
            return not_found("Not bulunamadı.")
        return Response({"success": True})

    def delete(self, request, note_id, **kwargs):
        if not services.delete_note(note_id, **self.owner(kwargs)):
            return not_found("Not bulunamadı.")
        return Response(status=status.HTTP_204_NO_CONTENT)


class CompanyNoteListView(NoteListView):
    owner_kwarg = "company_id"


class CompanyNoteDetailView(NoteDetailView):
    owner_kwarg = "company_id"


class ContactNoteListView(NoteListView):
    owner_kwarg = "contact_id"


class ContactNoteDetailView(NoteDetailView):
    owner_kwarg = "contact_id"
