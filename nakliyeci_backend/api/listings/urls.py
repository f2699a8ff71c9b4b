from django.urls import path

from .views import AdminListingListView, ListingDetailView, ListingListView, MyListingsView

app_name = "listings"

urlpatterns = [
    path("", ListingListView.as_view(), name="listings"),
    path("mine/", MyListingsView.as_view(), name="my-listings"),
    path("admin/", AdminListingListView.as_view(), name="admin-listings"),
    path("<uuid:pk>/", ListingDetailView.as_view(), name="listing-detail"),
]
