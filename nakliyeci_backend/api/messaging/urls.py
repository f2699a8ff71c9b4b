from django.urls import path

from .views import MessageDetailView, MessageListView, MessageReadView, UnreadCountView

app_name = "messaging"

urlpatterns = [
    path("", MessageListView.as_view(), name="messages"),
    path("unread-count/", UnreadCountView.as_view(), name="unread-count"),
    path("<uuid:pk>/", MessageDetailView.as_view(), name="message-detail"),
    path("<uuid:pk>/read/", MessageReadView.as_view(), name="message-read"),
]
