from django.urls import path

from . import views

app_name = "tracker"

urlpatterns = [
    path("", views.DailyLogListCreateView.as_view(), name="logs"),
    path("dashboard/", views.DashboardView.as_view(), name="dashboard"),
]
