# outreach_site/urls.py
from django.urls import include, path

urlpatterns = [
    path('api/', include('outreach_app.urls')),
]
