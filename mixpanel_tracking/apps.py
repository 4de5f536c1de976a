from django.apps import AppConfig


class MixpanelTrackingConfig(AppConfig):
    name = 'mixpanel_tracking'
    verbose_name = 'Mixpanel tracking'

    def ready(self):
        from . import checks  # noqa: F401
