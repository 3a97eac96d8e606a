"""
Fish-Smart members URL Configuration
"""
from django.conf import settings
from django.contrib import admin
from django.urls import path

# Customize admin site
admin.site.site_header = "Fish-Smart Administration"
admin.site.site_title = "Fish-Smart Admin"
admin.site.index_title = "Reference data and member records"

urlpatterns = [
    path(getattr(settings, 'ADMIN_URL', 'admin/'), admin.site.urls),
]
