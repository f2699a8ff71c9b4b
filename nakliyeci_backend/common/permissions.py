from rest_framework.permissions import BasePermission


class IsAdmin(BasePermission):
    message = "Bu işlem için yönetici girişi gereklidir."

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and getattr(user, "is_admin", False))


class IsSuperAdmin(BasePermission):
    message = "Bu işlem yalnızca süper yöneticiler içindir."

    def has_permission(self, request, view):
        return IsAdmin().has_permission(request, view) and request.user.admin.is_super_admin


class IsFirebaseUser(BasePermission):
    message = "Bu işlem için giriş yapmalısınız."

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and getattr(user, "uid", None))


class IsOwnerOrAdmin(BasePermission):
    """
    Nesne sahibi (user_id == uid) ya da yönetici.
    """

    owner_field = "user_id"

    def has_permission(self, request, view):
        return IsAdmin().has_permission(request, view) or IsFirebaseUser().has_permission(
            request, view
        )

    def has_object_permission(self, request, view, obj):
        if getattr(request.user, "is_admin", False):
            return True
        return getattr(obj, self.owner_field, None) == getattr(request.user, "uid", None)
