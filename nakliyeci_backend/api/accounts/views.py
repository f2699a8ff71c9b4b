from django.conf import settings
from drf_spectacular.utils import OpenApiParameter, extend_schema, inline_serializer
from rest_framework import serializers, status
from rest_framework.response import Response
from rest_framework.views import APIView

from common.permissions import IsAdmin, IsFirebaseUser, IsSuperAdmin
from common.responses import filter_params, mutation_response, not_found, page_params, page_response

from . import services
from .authentication import issue_admin_token
from .models import CompanyCategory, UserRole
from .serializers import (
    AdminCreateSerializer,
    AdminLoginSerializer,
    AdminPasswordChangeSerializer,
    AdminProfileSerializer,
    AdminUpdateSerializer,
    CompanyCardSerializer,
    ProfileCreateSerializer,
    ProfileSerializer,
    UserActiveSerializer,
    UserRoleSerializer,
    profile_serializer_for,
    serialize_profile,
)

PAGE_PARAMS = [
    OpenApiParameter("page_size", int, required=False),
    OpenApiParameter("cursor", str, required=False),
]


# ===================== Profil (Firebase kullanıcısı) =====================


@extend_schema(tags=["profile"])
class MyProfileView(APIView):
    permission_classes = [IsFirebaseUser]

    def get(self, request):
        profile = services.get_user_profile(request.user.uid)
        if profile is None:
            return not_found("Profil bulunamadı.")
        return Response(serialize_profile(profile))

    @extend_schema(request=ProfileCreateSerializer)
    def post(self, request):
        data = request.data.copy()
        data.setdefault("email", request.user.email)
        s = ProfileCreateSerializer(data=data)
        s.is_valid(raise_exception=True)
        profile, error = services.create_user_profile(request.user.uid, s.validated_data)
        if error:
            return Response({"detail": error}, status=status.HTTP_400_BAD_REQUEST)
        return Response(serialize_profile(profile), status=status.HTTP_201_CREATED)

    def patch(self, request):
        profile = services.get_user_profile(request.user.uid)
        if profile is None:
            return not_found("Profil bulunamadı.")
        s = profile_serializer_for(profile.role)(profile, data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        # kullanıcı kendi onay durumunu değiştiremez
        s.validated_data.pop("is_active", None)
        result = services.update_user_profile(profile.pk, s.validated_data)
        if not result.success:
            return mutation_response(result)
        return Response(serialize_profile(services.get_user_profile(profile.pk)))


# ===================== Firmalar (herkese açık) =====================


@extend_schema(
    tags=["companies"],
    parameters=[
        OpenApiParameter("city", str, required=False),
        OpenApiParameter("category", str, required=False),
        OpenApiParameter("country", str, required=False),
        *PAGE_PARAMS,
    ],
)
class CompanyListView(APIView):
    def get(self, request):
        page_size, cursor = page_params(request, settings.COMPANY_PAGE_SIZE)
        page = services.get_paginated_companies(
            filter_params(request, ("city", "category", "country")), page_size, cursor
        )
        return page_response(page, CompanyCardSerializer)


@extend_schema(tags=["companies"], parameters=[OpenApiParameter("q", str)])
class CompanySearchView(APIView):
    def get(self, request):
        companies = services.search_company_profiles_by_name(request.query_params.get("q", ""))
        return Response(CompanyCardSerializer(companies, many=True).data)


@extend_schema(tags=["companies"])
class CompanyCategoryView(APIView):
    def get(self, request, slug):
        category = CompanyCategory.from_slug(slug)
        if category is None:
            return not_found("Kategori bulunamadı.")
        companies = services.get_company_profiles_by_category(category)
        return Response(
            {"category": category, "results": CompanyCardSerializer(companies, many=True).data}
        )


@extend_schema(tags=["companies"])
class CompanyDetailView(APIView):
    def get(self, request, pk):
        profile = services.get_user_profile(pk)
        if profile is None or not profile.is_active or profile.role != UserRole.COMPANY:
            return not_found("Firma bulunamadı.")
        return Response(CompanyCardSerializer(profile).data)


# ===================== Yönetici oturumu =====================


@extend_schema(
    tags=["admin-auth"],
    request=AdminLoginSerializer,
    responses=inline_serializer(
        "AdminLoginResponse",
        {
            "access": serializers.CharField(),
            "expires_at": serializers.IntegerField(),
            "admin": AdminProfileSerializer(),
        },
    ),
)
class AdminLoginView(APIView):
    authentication_classes = []

    def post(self, request):
        s = AdminLoginSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        admin = services.authenticate_admin(s.validated_data["username"], s.validated_data["password"])
        if admin is None:
            return Response(
                {"detail": "Geçersiz kullanıcı adı veya şifre."},
                status=status.HTTP_401_UNAUTHORIZED,
            )
        return Response({**issue_admin_token(admin), "admin": AdminProfileSerializer(admin).data})


@extend_schema(tags=["admin-auth"], responses=AdminProfileSerializer)
class AdminMeView(APIView):
    permission_classes = [IsAdmin]

    def get(self, request):
        return Response(AdminProfileSerializer(request.user.admin).data)


# ===================== Yönetici: kullanıcılar =====================


@extend_schema(
    tags=["admin-users"],
    parameters=[
        OpenApiParameter("pending", bool, required=False),
        OpenApiParameter("sponsors", bool, required=False),
        OpenApiParameter("membership", str, required=False, description="has | has_not | gün"),
        OpenApiParameter("role", str, required=False),
        *PAGE_PARAMS,
    ],
)
class AdminUserListView(APIView):
    permission_classes = [IsAdmin]

    def get(self, request):
        page_size, cursor = page_params(request, settings.ADMIN_USERS_PAGE_SIZE)
        page = services.get_paginated_admin_users(
            filter_params(request, ("pending", "sponsors", "membership", "role")), page_size, cursor
        )
        return page_response(page, ProfileSerializer)


@extend_schema(tags=["admin-users"])
class AdminUserDetailView(APIView):
    permission_classes = [IsAdmin]

    def get(self, request, pk):
        profile = services.get_user_profile(pk)
        if profile is None:
            return not_found("Kullanıcı bulunamadı.")
        return Response(serialize_profile(profile))

    def patch(self, request, pk):
        profile = services.get_user_profile(pk)
        if profile is None:
            return not_found("Kullanıcı bulunamadı.")
        s = profile_serializer_for(profile.role)(profile, data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        result = services.update_user_profile(pk, s.validated_data)
        if not result.success:
            return mutation_response(result)
        return Response(serialize_profile(services.get_user_profile(pk)))

    def delete(self, request, pk):
        if not services.delete_user_profile(pk):
            return not_found("Kullanıcı bulunamadı.")
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=["admin-users"], request=UserActiveSerializer)
class AdminUserActiveView(APIView):
    permission_classes = [IsAdmin]

    def post(self, request, pk):
        s = UserActiveSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        return mutation_response(services.set_user_active(pk, s.validated_data["is_active"]))


@extend_schema(tags=["admin-users"], request=UserRoleSerializer)
class AdminUserRoleView(APIView):
    permission_classes = [IsAdmin]

    def post(self, request, pk):
        s = UserRoleSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        return mutation_response(services.change_user_role(pk, s.validated_data["role"]))


@extend_schema(tags=["admin-users"], request=AdminPasswordChangeSerializer)
class AdminUserPasswordView(APIView):
    permission_classes = [IsAdmin]

    def post(self, request, pk):
        s = AdminPasswordChangeSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        return mutation_response(
            services.change_user_password_by_admin(pk, s.validated_data["new_password"])
        )


# ===================== Yönetici: yöneticiler =====================


@extend_schema(tags=["admin-admins"])
class AdminListView(APIView):
    def get_permissions(self):
        if self.request.method == "POST":
            return [IsSuperAdmin()]
        return [IsAdmin()]

    @extend_schema(responses=AdminProfileSerializer(many=True))
    def get(self, request):
        return Response(AdminProfileSerializer(services.get_all_admins(), many=True).data)

    @extend_schema(request=AdminCreateSerializer, responses=AdminProfileSerializer)
    def post(self, request):
        s = AdminCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        admin, error = services.add_admin(s.validated_data)
        if error:
            return Response({"detail": error}, status=status.HTTP_400_BAD_REQUEST)
        return Response(AdminProfileSerializer(admin).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=["admin-admins"])
class AdminDetailView(APIView):
    permission_classes = [IsSuperAdmin]

    @extend_schema(request=AdminUpdateSerializer)
    def patch(self, request, pk):
        s = AdminUpdateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        return mutation_response(services.update_admin(pk, s.validated_data))

    def delete(self, request, pk):
        if str(request.user.admin.pk) == str(pk):
            return Response(
                {"detail": "Kendi yönetici hesabınızı silemezsiniz."},
                status=status.HTTP_400_BAD_REQUEST,
            )
        if not services.delete_admin(pk):
            return not_found("Yönetici bulunamadı.")
        return Response(status=status.HTTP_204_NO_CONTENT)
