from django.urls import path

from .views import (
    AdminCompanySponsorshipsView,
    AdminSponsorDetailView,
    AdminSponsorListView,
    SponsoredCompaniesView,
)

app_name = "sponsors"

urlpatterns = [
    path("", SponsoredCompaniesView.as_view(), name="sponsored-companies"),
    path("admin/", AdminSponsorListView.as_view(), name="admin-sponsors"),
    path("admin/<uuid:pk>/", AdminSponsorDetailView.as_view(), name="admin-sponsor-detail"),
    path(
        "admin/companies/<str:company_id>/",
        AdminCompanySponsorshipsView.as_view(),
        name="admin-company-sponsorships",
    ),
]
