from rest_framework import permissions


class HasRole(permissions.BasePermission):
    """
    Role-based access: the caller must be logged in and hold `role`.
    """
    role = None
    message = "Forbidden: Insufficient permissions"

    def has_permission(self, request, view):
        return bool(
            request.user and
            request.user.is_authenticated and
            request.user.role == self.role
        )


class IsSeeker(HasRole):
    role = 'seeker'
    message = "Only job seekers can perform this action."


class IsEmployer(HasRole):
    role = 'employer'
    message = "Only employers can perform this action."


class IsPlatformAdmin(HasRole):
    role = 'admin'
    message = "Admin access required."
