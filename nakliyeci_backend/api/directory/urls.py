from django.urls import path

from .views import (
    CompanyNoteDetailView,
    CompanyNoteListView,
    ContactConvertView,
    ContactDetailView,
    ContactListView,
    ContactNoteDetailView,
    ContactNoteListView,
)

app_name = "directory"

urlpatterns = [
    path("contacts/", ContactListView.as_view(), name="contacts"),
    path("contacts/<uuid:pk>/", ContactDetailView.as_view(), name="contact-detail"),
    path("contacts/<uuid:pk>/convert/", ContactConvertView.as_view(), name="contact-convert"),
    path("contacts/<uuid:contact_id>/notes/", ContactNoteListView.as_view(), name="contact-notes"),
    path(
        "contacts/<uuid:contact_id>/notes/<uuid:note_id>/",
        ContactNoteDetailView.as_view(),
        name="contact-note-detail",
    ),
    path("companies/<str:company_id>/notes/", CompanyNoteListView.as_view(), name="company-notes"),
    path(
        "companies/<str:company_id>/notes/<uuid:note_id>/",
        CompanyNoteDetailView.as_view(),
        name="company-note-detail",
    ),
]
