from mixpanel import Mixpanel, MixpanelException
from django.conf import settings
import logging

logger = logging.getLogger(__name__)

_client = None


def get_client_ip(request):
    """
    Get the real client IP address from the request, considering possible headers set by the load balancer.

    :param request: Django request object.
    :return: Real client IP address.
    """
    x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
    if x_forwarded_for:
        ip = x_forwarded_for.split(',')[0].strip()
    else:
        ip = request.META.get('REMOTE_ADDR')
    return ip


class TrackingClient:
    """
    Sends events and profile updates to Mixpanel.

    Anything exposing track_event and set_profile with the same signatures can
    stand in for this class through configure_client.
    """

    def __init__(self, token, consumer=None, run_async=False):
        self.mp = Mixpanel(token, consumer=consumer)
        self.run_async = run_async

    def track_event(self, event_name, properties, options):
        if self.run_async:
            from .tasks import send_event_task
            send_event_task.delay(event_name, properties, options)
            return
        self.send_event(event_name, properties, options)

    def set_profile(self, distinct_id, properties, options):
        if self.run_async:
            from .tasks import send_profile_task
            send_profile_task.delay(distinct_id, properties, options)
            return
        self.send_profile(distinct_id, properties, options)

    def send_event(self, event_name, properties, options):
        distinct_id = options.get('distinct_id', '')
        properties = dict(properties)
        if options.get('ip'):
            properties['ip'] = options['ip']

        logger.info(f"Tracking event: {event_name} for distinct_id: {distinct_id} with properties: {properties}")
        try:
            self.mp.track(distinct_id, event_name, properties)
        except MixpanelException as e:
            logger.error(f"Failed to send event {event_name} to Mixpanel: {e}")

    def send_profile(self, distinct_id, properties, options):
        meta = {}
        if options.get('ip'):
            meta['$ip'] = options['ip']

        logger.info(f"Updating profile for distinct_id: {distinct_id} with properties: {properties}")
        try:
            self.mp.people_set(distinct_id, properties, meta=meta)
        except MixpanelException as e:
            logger.error(f"Failed to update Mixpanel profile for distinct_id {distinct_id}: {e}")


def get_client():
    """
    Return the configured tracking client, building one from settings on first use.

    :return: The client, or None when no client is configured and MIXPANEL_TOKEN is empty.
    """
    global _client
    if _client is None:
        token = getattr(settings, 'MIXPANEL_TOKEN', None)
        if not token:
            logger.warning("MIXPANEL_TOKEN is not set, skipping Mixpanel dispatch")
            return None
        _client = TrackingClient(token, run_async=getattr(settings, 'MIXPANEL_ASYNC', False))
    return _client


def configure_client(client):
    global _client
    _client = client


def reset_client():
    configure_client(None)
