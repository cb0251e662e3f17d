from django.urls import path
from .views import (
    MaintenanceDashboardView,
    MaintenanceToggleView,
    MaintenanceMessageView,
    PageStatusListView,
    PageStatusUpdateView,
)

app_name = "maintenance"

urlpatterns = [
    path("maintenance/", MaintenanceDashboardView.as_view(), name="control"),
    path("maintenance/toggle/", MaintenanceToggleView.as_view(), name="toggle"),
    path("maintenance/message/", MaintenanceMessageView.as_view(), name="message"),
    path("pages/", PageStatusListView.as_view(), name="pages"),
    path("pages/update/", PageStatusUpdateView.as_view(), name="page_update"),
]
