from django.urls import path

from ads.handlers import AdPlacementView, AdViewTrackingView

urlpatterns = [
    path("ads/placements", AdPlacementView.as_view(), name="ad-placements"),
    path("ads/<str:ad_id>/views", AdViewTrackingView.as_view(), name="ad-views"),
]
