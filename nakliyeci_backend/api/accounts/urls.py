from django.urls import path

from .views import (
    AdminDetailView,
    AdminListView,
    AdminLoginView,
    AdminMeView,
    AdminUserActiveView,
    AdminUserDetailView,
    AdminUserListView,
    AdminUserPasswordView,
    AdminUserRoleView,
    CompanyCategoryView,
    CompanyDetailView,
    CompanyListView,
    CompanySearchView,
    MyProfileView,
)

app_name = "accounts"

urlpatterns = [
    # Profil
    path("profile/", MyProfileView.as_view(), name="my-profile"),
    # Firmalar
    path("companies/", CompanyListView.as_view(), name="companies"),
    path("companies/search/", CompanySearchView.as_view(), name="company-search"),
    path("companies/category/<slug:slug>/", CompanyCategoryView.as_view(), name="company-category"),
    path("companies/<str:pk>/", CompanyDetailView.as_view(), name="company-detail"),
    # Yönetici oturumu
    path("admin/login/", AdminLoginView.as_view(), name="admin-login"),
    path("admin/me/", AdminMeView.as_view(), name="admin-me"),
    # Yönetici: kullanıcılar
    path("admin/users/", AdminUserListView.as_view(), name="admin-users"),
    path("admin/users/<str:pk>/", AdminUserDetailView.as_view(), name="admin-user-detail"),
    path("admin/users/<str:pk>/active/", AdminUserActiveView.as_view(), name="admin-user-active"),
    path("admin/users/<str:pk>/role/", AdminUserRoleView.as_view(), name="admin-user-role"),
    path(
        "admin/users/<str:pk>/password/",
        AdminUserPasswordView.as_view(),
        name="admin-user-password",
    ),
    # Yönetici: yöneticiler
    path("admin/admins/", AdminListView.as_view(), name="admins"),
    path("admin/admins/<uuid:pk>/", AdminDetailView.as_view(), name="admin-detail"),
]
