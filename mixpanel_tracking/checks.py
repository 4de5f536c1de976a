from django.conf import settings
from django.core.checks import Warning, register


@register()
def check_mixpanel_token(app_configs, **kwargs):
    """
    Warn at startup when events would be dropped for lack of a token.
    """
    if getattr(settings, 'MIXPANEL_TOKEN', None):
        return []
    return [
        Warning(
            "MIXPANEL_TOKEN is not set; Mixpanel events and profile updates will be skipped.",
            hint="Set the MIXPANEL_TOKEN environment variable to your Mixpanel project token.",
            id='mixpanel_tracking.W001',
        )
    ]
