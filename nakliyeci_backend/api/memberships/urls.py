from django.urls import path

from .views import MembershipRequestDetailView, MembershipRequestListView

app_name = "memberships"

urlpatterns = [
    path("", MembershipRequestListView.as_view(), name="membership-requests"),
    path("<uuid:pk>/", MembershipRequestDetailView.as_view(), name="membership-request-detail"),
]
