"""
Enrichment layers for event properties.

Each layer takes the properties built so far and the request, and returns a new
dict. Layers run in the order of ENRICHMENT_LAYERS. Apart from the page layer,
a layer only fills keys that are still missing, so caller-supplied values win.
"""
from urllib.parse import urlsplit
import logging

from user_agents import parse as parse_user_agent

logger = logging.getLogger(__name__)

UTM_PARAMETERS = ('utm_source', 'utm_medium', 'utm_campaign', 'utm_content', 'utm_term')

UNKNOWN_DEVICE = 'Other'


def header_values(request, name):
    """
    All values of a request header, in order.

    Repeated header lines reach Django joined with commas.
    """
    value = request.headers.get(name)
    if value is None:
        return []
    return [part.strip() for part in value.split(',')]


def _put_new(properties, key, value):
    if key not in properties:
        properties[key] = value


def put_page_properties(properties, request):
    properties = dict(properties)
    properties['Current Path'] = request.path
    return properties


def put_referrer_properties(properties, request):
    # Not split on commas: a referrer URL may contain them.
    referrer = request.headers.get('referer')
    if referrer is None:
        return properties

    properties = dict(properties)
    _put_new(properties, '$referrer', referrer)
    _put_new(properties, '$referring_domain', urlsplit(referrer).hostname)
    return properties


def put_user_agent_properties(properties, request):
    ua_string = request.headers.get('user-agent')
    if not ua_string:
        return properties

    try:
        ua = parse_user_agent(ua_string)
        os_name = f"{ua.os.family} {ua.os.version_string}".strip()
        browser = ua.browser.family
        browser_version = ua.browser.version_string
        device = ua.device.family
    except Exception as e:
        logger.debug(f"Could not parse user agent {ua_string!r}: {e}")
        return properties

    properties = dict(properties)
    _put_new(properties, '$os', os_name)
    _put_new(properties, '$browser', browser)
    _put_new(properties, '$browser_version', browser_version)
    if device and device != UNKNOWN_DEVICE:
        _put_new(properties, '$device', device)
    return properties


def put_utm_properties(properties, request):
    properties = dict(properties)
    for key in UTM_PARAMETERS:
        value = request.GET.get(key)
        if value is not None:
            _put_new(properties, key, value)
    return properties


ENRICHMENT_LAYERS = (
    put_page_properties,
    put_referrer_properties,
    put_user_agent_properties,
    put_utm_properties,
)


def get_properties(request, properties=None):
    """
    Build the full property set for an event.

    :param request: Django request object.
    :param properties: Optional caller properties; never mutated.
    :return: New dict with the caller properties plus request context.
    """
    properties = dict(properties or {})
    for layer in ENRICHMENT_LAYERS:
        properties = layer(properties, request)
    return properties
