"""
Root URL configuration.

Admin and the OpenAPI views come first; the records app contributes the
``/api/`` routes, health and metrics, and the catch-all client fallback,
so it is included last.
"""
from django.contrib import admin
from django.urls import include, path
from drf_yasg import openapi
from drf_yasg.views import get_schema_view
from rest_framework import permissions

api_info = openapi.Info(
    title="Front Desk Records API",
    default_version='v1',
    description="Patients, medical reports and insurance forms for the hospital front desk.",
)

schema_view = get_schema_view(api_info, public=True, permission_classes=(permissions.AllowAny,))

urlpatterns = [
    path('admin/', admin.site.urls),
    path('swagger/', schema_view.with_ui('swagger', cache_timeout=0), name='schema-swagger-ui'),
    path('redoc/', schema_view.with_ui('redoc', cache_timeout=0), name='schema-redoc'),
    path('', include('records.routers')),
]
