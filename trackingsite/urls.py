from django.urls import include, path

urlpatterns = [
    path('', include('mixpanel_tracking.urls')),
]
