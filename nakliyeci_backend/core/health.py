import logging

import firebase_admin
from django.db import DatabaseError, connection
from django.http import HttpRequest, JsonResponse
from django.views.decorators.http import require_GET

logger = logging.getLogger(__name__)


@require_GET
def health(_request: HttpRequest) -> JsonResponse:
    """Veritabanı bağlantısı ve Firebase başlatma durumu."""
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError:
        logger.exception("Health check: database unavailable")
        return JsonResponse({"status": "error", "database": False}, status=503)
    return JsonResponse(
        {"status": "ok", "database": True, "firebase": bool(firebase_admin._apps)}
    )
