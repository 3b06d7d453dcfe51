"""
API URL configuration.
"""
from django.urls import path
from . import views

urlpatterns = [
    path('health/', views.HealthCheckView.as_view(), name='health-check'),
    
    # Session management
    path('session/init/', views.SessionInitView.as_view(), name='session-init'),
    path('session/status/', views.SessionStatusView.as_view(), name='session-status'),
    
    # Command execution
    path('session/command/', views.CommandView.as_view(), name='session-command'),
    path('session/batch/', views.BatchCommandView.as_view(), name='session-batch'),
]
