from django.urls import path
from .views import (
    HomeView,
    DevNoteListView,
    DevNoteDetailView,
    CreatorListView,
    CreatorDetailView,
    ComingSoonView,
    MaintenancePageView,
)

app_name = "landing"

urlpatterns = [
    path("", HomeView.as_view(), name="home"),
    path("dev-notes/", DevNoteListView.as_view(), name="dev_notes"),
    path("dev-notes/<slug:slug>/", DevNoteDetailView.as_view(), name="dev_note_detail"),
    path("creators/", CreatorListView.as_view(), name="creators"),
    path("creators/<slug:slug>/", CreatorDetailView.as_view(), name="creator_detail"),
    path("coming-soon/", ComingSoonView.as_view(), name="coming_soon"),
    path("maintenance/", MaintenancePageView.as_view(), name="maintenance"),
]
