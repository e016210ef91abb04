import pytest

from iga_client.core.platform import filters


def test_workflow_node_filter():
    assert filters.by_workflow_node("wf1", "n2") == 'objectId eq "workflow/wf1/node/n2"'


def test_form_id_filter():
    assert filters.by_form_id("form-1") == 'formId eq "form-1"'


def test_request_type_filter():
    assert filters.by_request_type("rt-7") == 'objectId eq "requestType/rt-7"'


def test_lcm_operation_filter():
    assert filters.by_lcm_operation("user", "create") == 'objectId eq "lcm/user/create"'


def test_request_types_of_form_filter():
    assert filters.request_types_of_form("f1") == 'objectId co "requestType/" and formId eq "f1"'


def test_lcm_type_of_form_filter():
    assert filters.lcm_type_of_form("f1", "role") == 'objectId co "lcm/role/" and formId eq "f1"'


def test_applications_of_form_filter():
    assert filters.applications_of_form("f1") == 'objectId co "application/" and formId eq "f1"'


def test_application_create_filter():
    assert filters.by_application_create("app9", "user") == 'objectId eq "application/app9/user/create"'


def test_values_are_inserted_verbatim():
    """Quotes, spaces and slashes are neither escaped nor URL-encoded."""
    assert filters.by_form_id('a"b c/d%20') == 'formId eq "a"b c/d%20"'


def test_and_requires_expressions():
    with pytest.raises(ValueError):
        filters.and_()


def test_and_single_expression_is_unchanged():
    assert filters.and_('formId eq "x"') == 'formId eq "x"'
