from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/admin/', include('apps.admin_config.urls')),
    path('api/admin/', include('apps.payouts.urls')),
]
