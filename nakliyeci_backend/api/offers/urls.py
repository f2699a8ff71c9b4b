from django.urls import path

from .views import (
    MyTransportOffersView,
    TransportOfferDetailView,
    TransportOfferListView,
)

app_name = "offers"

urlpatterns = [
    path("", TransportOfferListView.as_view(), name="offers"),
    path("mine/", MyTransportOffersView.as_view(), name="my-offers"),
    path("<uuid:pk>/", TransportOfferDetailView.as_view(), name="offer-detail"),
]
