from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from core.health import health

urlpatterns = [
    path("admin/", admin.site.urls),
    # OpenAPI/Swagger
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="docs"),
    # API
    path("api/", include("api.accounts.urls")),
    path("api/listings/", include("api.listings.urls")),
    path("api/offers/", include("api.offers.urls")),
    path("api/sponsors/", include("api.sponsors.urls")),
    path("api/messages/", include("api.messaging.urls")),
    path("api/directory/", include("api.directory.urls")),
    path("api/membership-requests/", include("api.memberships.urls")),
    path("api/settings/", include("api.catalog.urls")),
    path("api/dashboard/", include("api.dashboard.urls")),
    # Health
    path("health/", health),
]
