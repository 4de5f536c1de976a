"""
Mixpanel tracking as Django middleware.

- Track events with useful context like referrer, user agent information, and UTM properties
- Keep user profiles up to date on every request
- Respects 'Do Not Track' request headers

Views call track(request, ...) and update_profile(request, ...) directly. What was
sent is kept on request.analytics for inspection.
"""
from django.conf import settings
from django.utils.deprecation import MiddlewareMixin
import logging

from .mixpanel_utils import get_client, get_client_ip
from .properties import get_properties, header_values
from .users import validate_user

logger = logging.getLogger(__name__)

DEFAULT_CURRENT_USER_ATTRIBUTE = 'current_user'


def tracking_disabled(request):
    """
    Check whether the 'Do Not Track' header is set to '1' on the request.

    Reads the headers every time; does not depend on the middleware having run.
    """
    return '1' in header_values(request, 'dnt')


def get_current_user(request):
    attribute = getattr(settings, 'MIXPANEL_CURRENT_USER_ATTRIBUTE', DEFAULT_CURRENT_USER_ATTRIBUTE)
    return validate_user(getattr(request, attribute, None))


def _do_not_track(request):
    return getattr(request, 'do_not_track', False) is True


def _analytics(request):
    if not hasattr(request, 'analytics'):
        request.analytics = {}
    return request.analytics


def get_options(request):
    options = {'ip': get_client_ip(request)}
    user = get_current_user(request)
    if user is not None:
        options['distinct_id'] = user.id
    return options


def update_profile(request, user):
    """
    Update a user profile in Mixpanel and record it as request.analytics['profile'].

    This is a noop if the 'Do Not Track' header is set, or if the user does not
    have an id, name and email.

    :param request: Django request object.
    :param user: Mapping or object with id, name and email.
    :return: The request.
    """
    if _do_not_track(request):
        return request

    user = validate_user(user)
    if user is None:
        return request

    properties = {
        '$name': user.name,
        '$email': user.email,
        'ID': user.id,
    }
    client = get_client()
    if client is None:
        return request

    client.set_profile(user.id, properties, {'ip': get_client_ip(request)})
    _analytics(request)['profile'] = properties
    return request


def track(request, event, properties=None):
    """
    Track an event in Mixpanel.

    This is a noop if the 'Do Not Track' header is set, or if no Mixpanel
    client is configured.

        track(request, "Added To Wishlist")
        track(request, "Discount Code Used", {"Value": "10"})

    :param request: Django request object.
    :param event: Name of the event.
    :param properties: Optional properties; they take precedence over derived ones,
        except 'Current Path'.
    :return: The request.
    """
    if _do_not_track(request):
        return request

    client = get_client()
    if client is None:
        return request

    properties = get_properties(request, properties)
    options = get_options(request)

    client.track_event(event, properties, options)

    analytics = _analytics(request)
    analytics['tracked_events'] = [(event, properties, options)] + analytics.get('tracked_events', [])
    return request


class MixpanelMiddleware(MiddlewareMixin):
    def process_request(self, request):
        request.do_not_track = tracking_disabled(request)
        if request.do_not_track:
            logger.debug(f"Tracking disabled by 'Do Not Track' header for {request.path}")
            return None

        user = get_current_user(request)
        if user is not None:
            update_profile(request, user)

        return None
