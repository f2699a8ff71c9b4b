from django.conf import settings
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response

from .results import MutationResult, Page


def mutation_response(result: MutationResult, success_status: int = status.HTTP_200_OK) -> Response:
    if result.success:
        return Response(result.as_dict(), status=success_status)
    code = status.HTTP_404_NOT_FOUND if result.not_found else status.HTTP_400_BAD_REQUEST
    return Response({"detail": result.message, **result.as_dict()}, status=code)


def page_response(page: Page, serializer_class, context=None) -> Response:
    """
    Sayfa hataları 200 ile gövdede döner; istemci boş liste + hata mesajı gösterir.
    """
    return Response(
        {
            "results": serializer_class(page.items, many=True, context=context or {}).data,
            "cursor": page.cursor,
            "error": page.error.as_dict() if page.error else None,
        }
    )


def not_found(message: str = "Kayıt bulunamadı.") -> Response:
    return Response({"detail": message}, status=status.HTTP_404_NOT_FOUND)


def page_params(request, default_size: int) -> tuple[int, str | None]:
    """?page_size=&cursor= okur; page_size MAX_PAGE_SIZE ile sınırlanır."""
    raw = request.query_params.get("page_size")
    size = default_size
    if raw not in (None, ""):
        try:
            size = int(raw)
        except ValueError:
            raise ValidationError({"page_size": "Sayfa boyutu pozitif bir tam sayı olmalıdır."})
        if size < 1:
            raise ValidationError({"page_size": "Sayfa boyutu pozitif bir tam sayı olmalıdır."})
    return min(size, settings.MAX_PAGE_SIZE), request.query_params.get("cursor") or None


def filter_params(request, names) -> dict:
    return {k: request.query_params[k] for k in names if request.query_params.get(k) not in (None, "")}
