from django.urls import path

from .views import CatalogDetailView, CatalogListView, SeedSettingsView

app_name = "catalog"

urlpatterns = [
    path("seed/", SeedSettingsView.as_view(), name="seed-settings"),
    path("<slug:kind>/", CatalogListView.as_view(), name="catalog"),
    path("<slug:kind>/<uuid:pk>/", CatalogDetailView.as_view(), name="catalog-detail"),
]
