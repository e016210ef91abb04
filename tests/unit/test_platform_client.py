from urllib.parse import parse_qs, urlparse

import pytest
import requests

from iga_client.core.platform import (
    PlatformClient,
    PlatformAPIError,
    MissingAccessTokenError,
    RequestDescriptor,
    create_client_with_token,
)
from iga_client.core.platform import descriptors


def test_get_sends_bearer_token_and_params(http):
    client = PlatformClient("https://tenant.example.com/iga/", token="tok")
    client.get("/governance/requestFormAssignments", params={"_queryFilter": 'formId eq "f1"'})

    call = http.calls[-1]
    assert call.method == "GET"
    assert call.url == "https://tenant.example.com/iga/governance/requestFormAssignments"
    assert call.headers["authorization"] == "Bearer tok"
    assert call.params == {"_queryFilter": 'formId eq "f1"'}


def test_explicit_access_token_overrides_default(http):
    client = PlatformClient("https://h/iga", token="default")
    client.get("/x", access_token="explicit")
    assert http.calls[-1].headers["authorization"] == "Bearer explicit"


def test_token_provider_is_consulted_on_every_call(http):
    tokens = iter(["first", "second"])
    client = PlatformClient("https://h/iga", token_provider=lambda: next(tokens))

    client.get("/x")
    client.get("/x")

    assert [c.headers["authorization"] for c in http.calls] == ["Bearer first", "Bearer second"]


def test_missing_token_raises_before_request(http):
    client = PlatformClient("https://h/iga", token_provider=lambda: None)
    with pytest.raises(MissingAccessTokenError):
        client.get("/x")
    assert http.calls == []


def test_error_status_raises_platform_api_error(http):
    http.status_code = 403
    client = create_client_with_token("https://h/iga", "tok")

    with pytest.raises(PlatformAPIError) as excinfo:
        client.get("/x")

    assert excinfo.value.status_code == 403
    assert excinfo.value.method == "GET"
    assert excinfo.value.url == "https://h/iga/x"
    assert not excinfo.value.not_found


def test_error_status_tolerated_when_not_failing_on_status(http):
    http.status_code = 404
    client = create_client_with_token("https://h/openidm", "tok")

    resp = client.delete("/config/uilocale/en", fail_on_status_code=False)
    assert resp.status_code == 404


def test_timeout_and_verify_are_forwarded(http):
    client = PlatformClient("https://h/iga", token="tok", timeout=3, verify=False)
    client.put("/x", json={"a": 1})

    call = http.calls[-1]
    assert call.timeout == 3
    assert call.verify is False
    assert call.json == {"a": 1}


def test_send_post_descriptor(http):
    client = create_client_with_token("https://h/iga", "tok")
    desc = RequestDescriptor("POST", "/p", action="assign", headers={"content-type": "application/json"}, body={"k": "v"})

    client.send(desc)

    call = http.calls[-1]
    assert call.method == "POST"
    assert call.params == {"_action": "assign"}
    assert call.json == {"k": "v"}
    assert call.headers["content-type"] == "application/json"
    assert call.headers["authorization"] == "Bearer tok"


def test_send_does_not_mutate_descriptor_headers(http):
    client = create_client_with_token("https://h/iga", "tok")
    desc = RequestDescriptor("GET", "/p", query_filter="q")

    client.send(desc)

    assert desc.headers == {}


def test_send_rejects_unknown_method(http):
    client = create_client_with_token("https://h/iga", "tok")
    with pytest.raises(ValueError):
        client.send(RequestDescriptor("PATCH", "/p"))


def test_fixed_token_client_forwards_verify_flag(http):
    client = create_client_with_token("https://h/iga", "tok", verify=False)
    client.get("/x")
    assert http.calls[-1].verify is False


def test_query_filter_wire_encoding():
    """requests form-encodes the filter; the backend decodes it to the same expression."""
    desc = descriptors.get_form_assignment_by_workflow_node("wf1", "n2")
    prepared = requests.Request(
        desc.method, f"https://h/iga{desc.path}", params=desc.params
    ).prepare()

    assert prepared.url == (
        "https://h/iga/governance/requestFormAssignments"
        "?_queryFilter=objectId+eq+%22workflow%2Fwf1%2Fnode%2Fn2%22"
    )
    query = urlparse(prepared.url).query
    assert parse_qs(query)["_queryFilter"] == ['objectId eq "workflow/wf1/node/n2"']
