from __future__ import annotations

import logging
from datetime import timedelta

from django.db import DatabaseError
from django.utils import timezone

from api.accounts.models import UserProfile, UserRole
from api.listings.models import Freight
from api.memberships.models import MembershipRequest, RequestStatus
from api.messaging.models import Message

logger = logging.getLogger(__name__)

RECENT_COMPANIES = 5


def get_dashboard_stats() -> dict | None:
    """Yönetim paneli özeti. Veritabanı hatasında None döner."""
    week_ago = timezone.now() - timedelta(days=7)
    companies = UserProfile.objects.filter(role=UserRole.COMPANY)
    try:
        return {
            "companies": companies.count(),
            "pending_companies": companies.filter(is_active=False).count(),
            "active_listings": Freight.objects.filter(is_active=True).count(),
            "listings_last_7_days": Freight.objects.filter(posted_at__gte=week_ago).count(),
            "membership_requests": MembershipRequest.objects.count(),
            "new_membership_requests": MembershipRequest.objects.filter(
                status=RequestStatus.NEW
            ).count(),
            "messages": Message.objects.count(),
            "unread_messages": Message.objects.filter(is_read=False).count(),
            "recent_companies": list(companies.order_by("-created_at")[:RECENT_COMPANIES]),
        }
    except DatabaseError:
        logger.exception("Error building dashboard stats")
        return None
