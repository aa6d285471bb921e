from django.contrib import admin
from django.urls import path, include
from core.views import health

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include('core.urls', namespace='core')),
    path('api/logs/', include('tracker.urls', namespace='tracker')),
    path("streak/", include("streak.urls", namespace="streak")),
    path("api/readiness/", include("readiness.urls", namespace="readiness")),
    path("health", health),
]
