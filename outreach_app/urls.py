# outreach_app/urls.py
from django.urls import path
from .views import (
    ProjectDetailView,
    ProjectListCreateView,
    ProjectStatsView,
    RecentProjectsView,
    SuggestProjectDetailsView,
)

urlpatterns = [
    path('projects/', ProjectListCreateView.as_view(), name='project-list'),
    path('projects/stats/', ProjectStatsView.as_view(), name='project-stats'),
    path('projects/recent/', RecentProjectsView.as_view(), name='project-recent'),
    path('projects/suggest/', SuggestProjectDetailsView.as_view(), name='project-suggest'),
    path('projects/<str:project_id>/', ProjectDetailView.as_view(), name='project-detail'),
]
