import pytest

from trigger_harness.core.exceptions import MissingParamError
from trigger_harness.core.resource_compiler import compile_resource, random_placeholder


def test_compiles_resource_name_from_params():
    resource = compile_resource(
        "companies/{company}/users/{user}", {"company": "Google", "user": "Lauren"}
    )
    assert resource == "companies/Google/users/Lauren"


def test_strips_leading_and_trailing_slashes():
    assert compile_resource("/ref/{id}/", {"id": "1"}) == "ref/1"


def test_extra_params_are_ignored():
    assert compile_resource("ref/{id}", {"id": "1", "other": "x"}) == "ref/1"


def test_missing_param_raises():
    with pytest.raises(MissingParamError) as exc_info:
        compile_resource("companies/{company}/users/{user}", {"company": "Google"})

    assert exc_info.value.name == "user"
    assert "{user}" in str(exc_info.value)


def test_placeholder_fills_missing_param():
    resource = compile_resource("ref/{id}/nested/{key}", {"id": "a"}, lambda name: f"<{name}>")
    assert resource == "ref/a/nested/<key>"


def test_random_placeholder_appends_digit():
    value = random_placeholder("wildcard")
    assert value.startswith("wildcard")
    assert value[-1] in "123456789"
    assert len(value) == len("wildcard") + 1
