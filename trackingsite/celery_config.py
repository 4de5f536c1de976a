import os
from celery import Celery

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'trackingsite.settings')

# Queue for Mixpanel dispatch when MIXPANEL_ASYNC is on; workers must consume it.
TRACKING_QUEUE = os.environ.get('MIXPANEL_CELERY_QUEUE', 'celery')

app = Celery('trackingsite')

app.config_from_object('django.conf:settings', namespace='CELERY')
app.conf.task_routes = {
    'mixpanel_tracking.tasks.*': {'queue': TRACKING_QUEUE},
}

app.autodiscover_tasks(['mixpanel_tracking'])
