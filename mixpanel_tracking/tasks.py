from celery import shared_task
from .mixpanel_utils import get_client


@shared_task(ignore_result=True)
def send_event_task(event_name, properties, options):
    client = get_client()
    if client is not None:
        client.send_event(event_name, properties, options)


@shared_task(ignore_result=True)
def send_profile_task(distinct_id, properties, options):
    client = get_client()
    if client is not None:
        client.send_profile(distinct_id, properties, options)
