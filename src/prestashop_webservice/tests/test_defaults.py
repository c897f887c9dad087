import pytest


@pytest.fixture
def target_class():
    from ..defaults import DefaultURLBuilder

    return DefaultURLBuilder


@pytest.mark.parametrize(
    "endpoint",
    ["https://shop.example.com", "https://shop.example.com/"],
)
def test_resource_url(target_class, endpoint):
    target = target_class(endpoint)
    assert target.resource_url() == "https://shop.example.com/api/"
    assert target.resource_url("addresses") == "https://shop.example.com/api/addresses"
    assert target.resource_url("addresses", 5) == "https://shop.example.com/api/addresses/5"


def test_id_is_quoted(target_class):
    target = target_class("https://shop.example.com")
    assert target.resource_url("tags", "a/b") == "https://shop.example.com/api/tags/a%2Fb"


def test_api_path(target_class):
    target = target_class("https://shop.example.com/shop", api_path="/webservice/")
    assert target.resource_url("tags") == "https://shop.example.com/shop/webservice/tags"
