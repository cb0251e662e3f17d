from django.contrib.auth.mixins import UserPassesTestMixin, LoginRequiredMixin
from rest_framework.permissions import BasePermission


def is_operator(user):
    return bool(user and user.is_authenticated and user.is_active and user.is_staff)


class StaffRequiredMixin(LoginRequiredMixin, UserPassesTestMixin):
    def test_func(self):
        return is_operator(self.request.user)


class IsOperator(BasePermission):
    def has_permission(self, request, view):
        return is_operator(request.user)
