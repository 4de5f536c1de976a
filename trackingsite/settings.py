import os

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'insecure-development-key')

DEBUG = os.environ.get('DJANGO_DEBUG', '') == '1'

ALLOWED_HOSTS = os.environ.get('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1,testserver').split(',')

INSTALLED_APPS = [
    'rest_framework',
    'mixpanel_tracking',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'mixpanel_tracking.middleware.MixpanelMiddleware',
]

ROOT_URLCONF = 'trackingsite.urls'

USE_TZ = True

# No user model is installed; DRF must not fall back to AnonymousUser.
REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': ['rest_framework.permissions.AllowAny'],
    'UNAUTHENTICATED_USER': None,
}

# Mixpanel
MIXPANEL_TOKEN = os.environ.get('MIXPANEL_TOKEN', '')
MIXPANEL_ASYNC = os.environ.get('MIXPANEL_ASYNC', '') == '1'
# Request attribute set by upstream code to the signed-in user (id, name, email)
MIXPANEL_CURRENT_USER_ATTRIBUTE = 'current_user'

# Celery
CELERY_BROKER_URL = os.environ.get('CELERY_BROKER_URL', 'redis://localhost:6379/0')
CELERY_TASK_SERIALIZER = 'json'
CELERY_ACCEPT_CONTENT = ['json']

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
        },
    },
    'loggers': {
        'mixpanel_tracking': {
            'handlers': ['console'],
            'level': os.environ.get('MIXPANEL_LOG_LEVEL', 'INFO'),
        },
    },
}
