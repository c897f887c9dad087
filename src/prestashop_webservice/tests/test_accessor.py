import xml.etree.ElementTree as ET

import pytest
import pytest_asyncio

from ..exceptions import MethodNotAllowedError, NotConnectedError, TransportError
from ..interfaces import Method
from ..querying import SearchCriteria
from ..resources import ADDRESS, PRODUCT
from ..serde.exceptions import DecodeError, MissingPropertiesError
from ..session import ConnectionSession
from .testing import ENDPOINT, FakeTransport, connectable_transport, resource_url

ADDRESSES_URL = resource_url("addresses")


def make_address(**values):
    address = {name: "" for name in ADDRESS.field_names}
    address.update(
        id_country=8,
        alias="Home",
        lastname="Doe",
        firstname="Jane",
        address1="1 rue de la Paix",
        city="Paris",
    )
    address.update(values)
    return address


@pytest.fixture
def target_class():
    from ..accessor import ResourceAccessor

    return ResourceAccessor


@pytest.fixture
def transport():
    return connectable_transport()


@pytest_asyncio.fixture
async def session(transport):
    return await ConnectionSession.connect(ENDPOINT, "KEY", transport=transport)


@pytest.fixture
def target(target_class, session):
    return target_class(ADDRESS, session)


class TestPermissions:
    @pytest.mark.parametrize(
        "matrix",
        [
            {"address": {"get": True, "put": False}},
            {"addresses": {"get": True, "put": False}},
        ],
    )
    @pytest.mark.asyncio
    async def test_update_refused_before_any_request(self, target_class, matrix):
        transport = connectable_transport(matrix)
        session = await ConnectionSession.connect(ENDPOINT, "KEY", transport=transport)
        issued = len(transport.requests)
        with pytest.raises(MethodNotAllowedError) as e:
            await target_class(ADDRESS, session).update(make_address(id=1))
        assert e.value.resource == "addresses"
        assert e.value.method is Method.PUT
        assert len(transport.requests) == issued

    @pytest.mark.asyncio
    async def test_not_connected(self, target_class):
        transport = FakeTransport()
        session = ConnectionSession(ENDPOINT, transport, None)  # type: ignore
        accessor = target_class(ADDRESS, session)
        with pytest.raises(NotConnectedError):
            await accessor.get(1)
        with pytest.raises(NotConnectedError):
            await accessor.delete(1)
        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_read_only_resource(self, target_class):
        transport = connectable_transport({"addresses": {"get": True}})
        session = await ConnectionSession.connect(ENDPOINT, "KEY", transport=transport)
        accessor = target_class(ADDRESS, session)
        with pytest.raises(MethodNotAllowedError):
            await accessor.create(make_address())
        with pytest.raises(MethodNotAllowedError):
            await accessor.update(make_address(id=1))


class TestGet:
    @pytest.mark.asyncio
    async def test_get(self, target, transport):
        transport.respond(
            Method.GET, resource_url("addresses", 1), {"addresses": [make_address(id=1)]}
        )
        address = await target.get(1)
        assert address["id"] == 1
        assert address["city"] == "Paris"
        (request,) = transport.requests_to(Method.GET, resource_url("addresses", 1))
        assert request.params == {"language": "1", "display": "full"}

    @pytest.mark.asyncio
    async def test_single_object_response(self, target, transport):
        transport.respond(Method.GET, resource_url("addresses", 1), {"address": {"id": 1}})
        assert await target.get(1) == {"id": 1}

    @pytest.mark.asyncio
    async def test_nothing_found(self, target, transport):
        transport.respond(Method.GET, resource_url("addresses", 2), [])
        assert await target.get(2) is None

    @pytest.mark.asyncio
    async def test_error_status(self, target, transport):
        transport.respond(Method.GET, resource_url("addresses", 3), None, status=404)
        with pytest.raises(TransportError) as e:
            await target.get(3)
        assert e.value.status == 404

    @pytest.mark.asyncio
    async def test_associations_are_normalized(self, target_class, session, transport):
        transport.respond(
            Method.GET,
            resource_url("products", 5),
            {"products": [{"id": 5, "associations": {"categories": [{"id": "2"}]}}]},
        )
        product = await target_class(PRODUCT, session).get(5)
        assert product["associations"]["categories"] == [{"id": "2"}]
        assert product["associations"]["tags"] == []
        assert set(product["associations"]) == set(PRODUCT.associations)

    @pytest.mark.asyncio
    async def test_uses_active_language(self, target, session, transport):
        transport.respond(Method.GET, resource_url("addresses", 1), {"addresses": []})
        session.set_active_language("2")
        await target.get(1)
        (request,) = transport.requests_to(Method.GET, resource_url("addresses", 1))
        assert request.params["language"] == "2"


class TestSearch:
    @pytest.fixture
    def products(self, target_class, session):
        return target_class(PRODUCT, session)

    @pytest.mark.asyncio
    async def test_full(self, products, transport):
        transport.respond(
            Method.GET,
            resource_url("products"),
            {
                "products": [
                    {"id": 1, "associations": {"categories": [{"id": "2"}, {"id": "3"}]}},
                    {"id": 2},
                    {"id": 3, "associations": {"tags": [{"id": "7"}]}},
                ]
            },
        )
        result = await products.search()
        assert [p["associations"]["categories"] for p in result] == [
            [{"id": "2"}, {"id": "3"}],
            [],
            [],
        ]
        assert result[2]["associations"]["tags"] == [{"id": "7"}]
        (request,) = transport.requests_to(Method.GET, resource_url("products"))
        assert request.params == {"language": "1", "display": "full"}

    @pytest.mark.asyncio
    async def test_summary_is_not_normalized(self, products, transport):
        transport.respond(Method.GET, resource_url("products"), {"products": [{"id": 1}]})
        result = await products.search(SearchCriteria(display=None))
        assert result == [{"id": 1}]
        (request,) = transport.requests_to(Method.GET, resource_url("products"))
        assert request.params == {"language": "1"}

    @pytest.mark.asyncio
    async def test_criteria(self, target, transport):
        transport.respond(Method.GET, ADDRESSES_URL, [])
        criteria = SearchCriteria(
            display=["id", "city"], filters={"city": "Paris"}, sort=["id_DESC"], limit=10
        )
        assert await target.search(criteria) == []
        (request,) = transport.requests_to(Method.GET, ADDRESSES_URL)
        assert request.params == {
            "language": "1",
            "display": "[id,city]",
            "filter[city]": "[Paris]",
            "sort": "[id_DESC]",
            "limit": "10",
        }


class TestCreate:
    @pytest.mark.asyncio
    async def test_create(self, target, transport):
        transport.respond(Method.POST, ADDRESSES_URL, {"addresses": [make_address(id=10)]})
        address = make_address()
        (created,) = await target.create(address)
        assert address["id"] == 10
        assert created["id"] == 10

        (request,) = transport.requests_to(Method.POST, ADDRESSES_URL)
        assert request.params == {"language": "1"}
        root = ET.fromstring(request.body)
        (elem,) = root
        assert elem.tag == "address"
        assert elem.find("id") is None
        assert elem.find("city").text == "Paris"

    @pytest.mark.asyncio
    async def test_batch(self, target, transport):
        transport.respond(
            Method.POST,
            ADDRESSES_URL,
            {"addresses": [make_address(id=10), make_address(id=11)]},
        )
        addresses = [make_address(), make_address(alias="Work")]
        await target.create(addresses)
        assert [a["id"] for a in addresses] == [10, 11]
        (request,) = transport.requests_to(Method.POST, ADDRESSES_URL)
        assert [e.find("alias").text for e in ET.fromstring(request.body)] == ["Home", "Work"]

    @pytest.mark.asyncio
    async def test_too_few_items_returned(self, target, transport):
        transport.respond(Method.POST, ADDRESSES_URL, {"addresses": [make_address(id=10)]})
        with pytest.raises(DecodeError) as e:
            await target.create([make_address(), make_address()])
        assert e.value.pointer == "/addresses"

    @pytest.mark.asyncio
    async def test_invalid_instance_is_not_sent(self, target, transport):
        address = make_address()
        del address["city"]
        with pytest.raises(MissingPropertiesError):
            await target.create(address)
        assert transport.requests_to(Method.POST, ADDRESSES_URL) == []

    @pytest.mark.asyncio
    async def test_error_status(self, target, transport):
        transport.respond(Method.POST, ADDRESSES_URL, None, status=500)
        address = make_address()
        with pytest.raises(TransportError) as e:
            await target.create(address)
        assert e.value.status == 500
        assert "id" not in address


class TestUpdate:
    @pytest.mark.asyncio
    async def test_update(self, target, transport):
        transport.respond(
            Method.PUT, ADDRESSES_URL, {"addresses": [make_address(id=1, city="Lyon")]}
        )
        (updated,) = await target.update(make_address(id=1, city="Lyon"))
        assert updated["city"] == "Lyon"
        (request,) = transport.requests_to(Method.PUT, ADDRESSES_URL)
        assert request.params == {"language": "1"}
        root = ET.fromstring(request.body)
        assert root[0].find("id").text == "1"
        assert root[0].find("city").text == "Lyon"


class TestDelete:
    """
    Deletes go out as a POST carrying a ``ps_method=DELETE`` override, and
    are allowed by the resource's POST flag rather than its DELETE flag.
    """

    @pytest.mark.asyncio
    async def test_delete_many(self, target, transport):
        transport.respond(Method.POST, ADDRESSES_URL)
        assert await target.delete([1, 2])
        (request,) = transport.requests_to(Method.POST, ADDRESSES_URL)
        assert request.method is Method.POST
        assert request.url == ADDRESSES_URL
        assert request.params == {"id": "[1,2]", "ps_method": "DELETE"}
        assert request.body is None

    @pytest.mark.asyncio
    async def test_delete_one(self, target, transport):
        transport.respond(Method.POST, ADDRESSES_URL)
        assert await target.delete("7")
        (request,) = transport.requests_to(Method.POST, ADDRESSES_URL)
        assert request.params["id"] == "[7]"

    @pytest.mark.asyncio
    async def test_failure_is_reported(self, target, transport):
        transport.respond(Method.POST, ADDRESSES_URL, None, status=500)
        assert not await target.delete(1)

    @pytest.mark.asyncio
    async def test_checked_against_post(self, target_class):
        transport = connectable_transport({"addresses": {"post": False, "delete": True}})
        session = await ConnectionSession.connect(ENDPOINT, "KEY", transport=transport)
        with pytest.raises(MethodNotAllowedError) as e:
            await target_class(ADDRESS, session).delete(1)
        assert e.value.method is Method.POST

        transport = connectable_transport({"addresses": {"post": True, "delete": False}})
        transport.respond(Method.POST, ADDRESSES_URL)
        session = await ConnectionSession.connect(ENDPOINT, "KEY", transport=transport)
        assert await target_class(ADDRESS, session).delete(1)


@pytest.mark.asyncio
async def test_accessor_for(session):
    from ..accessor import accessor_for

    accessor = accessor_for(session, "products")
    assert accessor.descr is PRODUCT
    assert accessor.session is session
    with pytest.raises(KeyError):
        accessor_for(session, "nonexistents")
