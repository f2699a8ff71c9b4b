from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.response import Response
from rest_framework.views import APIView

from common.permissions import IsAdmin
from common.responses import not_found

from . import services


class CatalogMixin:
    def catalog(self, kind) -> services.Catalog:
        catalog = services.get_catalog(kind)
        if catalog is None:
            raise NotFound("Ayar türü bulunamadı.")
        return catalog


@extend_schema(tags=["settings"])
class CatalogListView(CatalogMixin, APIView):
    """
    Yöneticiler tüm kayıtları, diğerleri yalnızca etkin kayıtları görür.
    Yönetici notları yalnızca yöneticilere açıktır.
    """

    def get_permissions(self):
        kind = self.kwargs.get("kind")
        catalog = services.get_catalog(kind)
        if self.request.method != "GET" or (catalog is not None and not catalog.public):
            return [IsAdmin()]
        return []

    def get(self, request, kind):
        catalog = self.catalog(kind)
        is_admin = getattr(request.user, "is_admin", False)
        items = services.list_items(catalog, active_only=catalog.public and not is_admin)
        return Response(catalog.serializer(items, many=True).data)

    def post(self, request, kind):
        catalog = self.catalog(kind)
        s = catalog.serializer(data=request.data)
        s.is_valid(raise_exception=True)
        item = services.add_item(catalog, s.validated_data)
        if item is None:
            return Response({"detail": "Kayıt eklenemedi."}, status=status.HTTP_400_BAD_REQUEST)
        return Response(catalog.serializer(item).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=["settings"])
class CatalogDetailView(CatalogMixin, APIView):
    permission_classes = [IsAdmin]

    def get(self, request, kind, pk):
        catalog = self.catalog(kind)
        item = services.get_item(catalog, pk)
        if item is None:
            return not_found()
        return Response(catalog.serializer(item).data)

    def patch(self, request, kind, pk):
        catalog = self.catalog(kind)
        s = catalog.serializer(data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        if not services.update_item(catalog, pk, s.validated_data):
            return not_found()
        return Response(catalog.serializer(services.get_item(catalog, pk)).data)

    def delete(self, request, kind, pk):
        catalog = self.catalog(kind)
        if not services.delete_item(catalog, pk):
            return not_found()
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=["settings"], request=None)
class SeedSettingsView(APIView):
    permission_classes = [IsAdmin]

    def post(self, request):
        ok, details = services.seed_settings()
        message = (
            "Başlangıç ayarları başarıyla yüklendi (veya zaten mevcuttu)."
            if ok
            else "Bazı ayarlar yüklenirken hatalar oluştu. Detayları kontrol edin."
        )
        return Response({"success": ok, "message": message, "details": details})
