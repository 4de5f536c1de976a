from unittest.mock import patch

from mixpanel_tracking import properties as props
from mixpanel_tracking.properties import ENRICHMENT_LAYERS, get_properties

from conftest import IPHONE_SAFARI


def test_layers_run_in_order():
    assert ENRICHMENT_LAYERS == (
        props.put_page_properties,
        props.put_referrer_properties,
        props.put_user_agent_properties,
        props.put_utm_properties,
    )


def test_page_layer_overwrites_current_path(rf):
    request = rf.get("/real")

    properties = get_properties(request, {"Current Path": "/fake"})

    assert properties["Current Path"] == "/real"


def test_caller_properties_win_over_derived(rf):
    request = rf.get(
        "/?utm_source=source",
        HTTP_REFERER="http://example.com/example",
        HTTP_USER_AGENT=IPHONE_SAFARI,
    )

    properties = get_properties(request, {
        "utm_source": "newsletter",
        "$referrer": "http://other.example/",
        "$browser": "Custom",
    })

    assert properties["utm_source"] == "newsletter"
    assert properties["$referrer"] == "http://other.example/"
    assert properties["$referring_domain"] == "example.com"
    assert properties["$browser"] == "Custom"


def test_referrer_without_host(rf):
    request = rf.get("/", HTTP_REFERER="not a url")

    properties = get_properties(request)

    assert properties["$referrer"] == "not a url"
    assert properties["$referring_domain"] is None


def test_iphone_user_agent(rf):
    request = rf.get("/", HTTP_USER_AGENT=IPHONE_SAFARI)

    properties = get_properties(request)

    assert properties["$os"] == "iOS 10.3.1"
    assert properties["$browser"] == "Mobile Safari"
    assert properties["$browser_version"] == "10.0"
    assert properties["$device"] == "iPhone"


def test_unknown_device_is_omitted(rf):
    request = rf.get("/", HTTP_USER_AGENT="curl/8.4.0")

    properties = get_properties(request)

    assert "$device" not in properties
    assert "$browser" in properties


def test_user_agent_parse_failure_is_ignored(rf):
    request = rf.get("/", HTTP_USER_AGENT=IPHONE_SAFARI)

    with patch.object(props, "parse_user_agent", side_effect=ValueError("bad agent")):
        properties = get_properties(request)

    for key in ("$os", "$browser", "$browser_version", "$device"):
        assert key not in properties
    assert properties["Current Path"] == "/"


def test_empty_utm_value_is_kept(rf):
    request = rf.get("/?utm_source=")

    properties = get_properties(request)

    assert properties["utm_source"] == ""
    assert "utm_medium" not in properties


def test_header_values_splits_repeated_headers(rf):
    request = rf.get("/", HTTP_DNT="0, 1")

    assert props.header_values(request, "dnt") == ["0", "1"]
    assert props.header_values(request, "x-missing") == []
