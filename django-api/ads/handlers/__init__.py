from ads.handlers.views import AdPlacementView, AdViewTrackingView

__all__ = ["AdPlacementView", "AdViewTrackingView"]
