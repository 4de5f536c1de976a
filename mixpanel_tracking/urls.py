from django.urls import path
from .views import TrackEventAPIView

urlpatterns = [
    path('track/', TrackEventAPIView.as_view(), name='track_event'),
]
