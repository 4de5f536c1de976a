import os
import sys
from unittest.mock import MagicMock

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'trackingsite.settings')

import django

django.setup()

import pytest
from django.test import RequestFactory

from mixpanel_tracking import mixpanel_utils
from mixpanel_tracking.mixpanel_utils import TrackingClient

CALLUM = {"id": 1, "name": "Callum", "email": "callum@example.com"}

IPHONE_SAFARI = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 10_3_1 like Mac OS X) AppleWebKit/603.1.30 "
    "(KHTML, like Gecko) Version/10.0 Mobile/14E304 Safari/602.1"
)


@pytest.fixture
def client_double():
    client = MagicMock(spec=TrackingClient)
    mixpanel_utils.configure_client(client)
    yield client
    mixpanel_utils.reset_client()


@pytest.fixture
def rf():
    return RequestFactory()
