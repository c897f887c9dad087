import pytest

from ...models import ResourceAssociationDescriptor, ResourceDescriptor, ResourceFieldDescriptor
from ..exceptions import DecodeError


@pytest.fixture
def target():
    from ..deserializer import ResponseDeserializer

    return ResponseDeserializer()


@pytest.fixture
def descr():
    return ResourceDescriptor(
        node_name="product",
        name="products",
        fields=[ResourceFieldDescriptor("name", translatable=True)],
        associations=[
            ResourceAssociationDescriptor("categories", {"category": ["id"]}),
            ResourceAssociationDescriptor("tags", {"tag": ["id"]}),
        ],
    )


@pytest.fixture
def tag_descr():
    return ResourceDescriptor("tag", "tags", [ResourceFieldDescriptor("name")])


def test_collection(target, descr):
    result = target(
        descr,
        {
            "products": [
                {"id": 1, "name": "Mug", "associations": {"categories": [{"id": "2"}]}},
                {"id": 2, "name": "Cup"},
            ]
        },
    )
    assert result == [
        {"id": 1, "name": "Mug", "associations": {"categories": [{"id": "2"}], "tags": []}},
        {"id": 2, "name": "Cup", "associations": {"categories": [], "tags": []}},
    ]


def test_without_normalization(target, descr):
    result = target(descr, {"products": [{"id": 2, "name": "Cup"}]}, normalize=False)
    assert result == [{"id": 2, "name": "Cup"}]


def test_single_object(target, descr):
    result = target(descr, {"product": {"id": 3, "name": "Bowl"}})
    assert result == [{"id": 3, "name": "Bowl", "associations": {"categories": [], "tags": []}}]


def test_empty_array_means_nothing_found(target, descr):
    assert target(descr, []) == []
    assert target(descr, {"products": []}) == []


def test_items_are_copied(target, descr):
    item = {"id": 1, "name": "Mug"}
    (result,) = target(descr, {"products": [item]})
    assert result is not item
    assert "associations" not in item


def test_resource_without_associations(target, tag_descr):
    assert target(tag_descr, {"tags": [{"id": 1, "name": "sale"}]}) == [{"id": 1, "name": "sale"}]


@pytest.mark.parametrize(
    "payload, pointer",
    [
        (None, "/"),
        ("products", "/"),
        ([{"id": 1}], "/"),
        ({"categories": []}, "/"),
        ({"products": {"id": 1}}, "/products"),
        ({"products": "nope"}, "/products"),
        ({"products": [{"id": 1}, 2]}, "/products/1"),
        ({"product": 2}, "/product"),
        ({"products": [{"id": 1, "associations": []}]}, "/products/0/associations"),
    ],
)
def test_malformed(target, descr, payload, pointer):
    with pytest.raises(DecodeError) as e:
        target(descr, payload)
    assert e.value.pointer == pointer
    assert e.value.payload == payload
    assert e.value.message.startswith(f"{pointer}: ")


class TestNormalizeAssociations:
    def test_fills_missing_associations(self, target, descr):
        item = {"id": 1, "associations": {"tags": [{"id": "4"}]}}
        assert target.normalize_associations(descr, item) is item
        assert item["associations"] == {"tags": [{"id": "4"}], "categories": []}

    def test_keeps_unknown_associations(self, target, descr):
        item = {"id": 1, "associations": {"images": [{"id": "9"}]}}
        target.normalize_associations(descr, item)
        assert item["associations"]["images"] == [{"id": "9"}]

    def test_null_associations(self, target, descr):
        item = {"id": 1, "associations": None}
        target.normalize_associations(descr, item)
        assert item["associations"] == {"categories": [], "tags": []}

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_association_values(self, target, descr, value):
        item = {"id": 1, "associations": {"categories": value, "tags": [{"id": "4"}]}}
        target.normalize_associations(descr, item)
        assert item["associations"] == {"categories": [], "tags": [{"id": "4"}]}

    def test_empty_association_values_in_response(self, target, descr):
        (result,) = target(
            descr, {"products": [{"id": 1, "associations": {"categories": None, "tags": ""}}]}
        )
        assert result["associations"] == {"categories": [], "tags": []}

    def test_invalid_associations(self, target, descr):
        with pytest.raises(DecodeError) as e:
            target.normalize_associations(descr, {"associations": "categories"})
        assert e.value.pointer == "/associations"
