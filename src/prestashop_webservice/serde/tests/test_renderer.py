import xml.etree.ElementTree as ET

import pytest

from ...models import ResourceDescriptor, ResourceFieldDescriptor
from ..exceptions import (
    IdentifierMismatchError,
    InvalidStructureError,
    MissingAssociationPropertiesError,
    MissingPropertiesError,
    RequiredPropertiesNotSetError,
)
from ..models import Operation


@pytest.fixture
def target_class():
    from ..renderer import PayloadRenderer

    return PayloadRenderer


@pytest.fixture
def target(target_class):
    return target_class()


@pytest.fixture
def tag_descr():
    return ResourceDescriptor(
        node_name="tag",
        name="tags",
        fields=[
            ResourceFieldDescriptor("id_lang", required=True),
            ResourceFieldDescriptor("name", required=True),
        ],
    )


@pytest.fixture
def product_descr():
    return ResourceDescriptor.from_indices(
        "product",
        "products",
        [
            "id_manufacturer",
            "id_supplier",
            "id_category_default",
            "ps_new",
            "cache_default_attribute",
            "id_default_image",
            "id_default_combination",
            "id_tax_rules_group",
            "position_in_category",
            "name",
            "quantity",
            "price",
        ],
        translatable_indices=[9],
        read_only_indices=[10],
        required_indices=[9, 11],
        associations={
            "categories": {"category": ["id"]},
            "product_features": {"product_feature": ["id", "id_feature_value"]},
        },
    )


@pytest.fixture
def product(product_descr):
    instance = {name: "" for name in product_descr.field_names}
    instance.update(
        {
            "id_manufacturer": 3,
            "name": "  Mug  ",
            "quantity": 42,
            "price": "9.90",
            "associations": {
                "categories": [{"id": 2}, {"id": 7}],
            },
        }
    )
    return instance


def parse(document):
    root = ET.fromstring(document)
    assert root.tag == "prestashop"
    return root


def test_translatable_and_read_only(target, product_descr, product):
    root = parse(target(product_descr, product, Operation.CREATE, "1"))
    (elem,) = root
    assert elem.tag == "product"
    assert elem.find("id") is None
    assert elem.find("quantity") is None
    name = elem.find("name")
    assert name.text is None
    (language,) = name
    assert language.tag == "language"
    assert language.attrib == {"id": "1"}
    assert language.text == "Mug"
    assert elem.find("id_manufacturer").text == "3"
    assert elem.find("price").text == "9.90"


def test_field_order(target, product_descr, product):
    root = parse(target(product_descr, product, Operation.CREATE, "1"))
    assert [child.tag for child in root[0]] == [
        "id_manufacturer",
        "id_supplier",
        "id_category_default",
        "ps_new",
        "cache_default_attribute",
        "id_default_image",
        "id_default_combination",
        "id_tax_rules_group",
        "position_in_category",
        "name",
        "price",
        "associations",
    ]


def test_associations(target, product_descr, product):
    root = parse(target(product_descr, product, Operation.CREATE, "1"))
    associations = root[0].find("associations")
    assert [child.tag for child in associations] == ["categories"]
    categories = associations.find("categories")
    assert [(c.tag, c.find("id").text) for c in categories] == [
        ("category", "2"),
        ("category", "7"),
    ]


def test_empty_associations_are_omitted(target, product_descr, product):
    product["associations"] = {"categories": [], "product_features": []}
    root = parse(target(product_descr, product, Operation.CREATE, "1"))
    assert list(root[0].find("associations")) == []


def test_association_item_fields_in_declared_order(target, product_descr, product):
    product["associations"]["product_features"] = [{"id_feature_value": 12, "id": 4}]
    root = parse(target(product_descr, product, Operation.CREATE, "1"))
    (feature,) = root[0].find("associations/product_features")
    assert feature.tag == "product_feature"
    assert [(c.tag, c.text) for c in feature] == [("id", "4"), ("id_feature_value", "12")]


def test_missing_association_properties(target, product_descr, product):
    product["associations"]["product_features"] = [{"id": 4}]
    with pytest.raises(MissingAssociationPropertiesError) as e:
        target(product_descr, product, Operation.CREATE, "1")
    assert e.value.path == "associations.product_features.product_feature"
    assert e.value.names == ("id_feature_value",)


def test_invalid_associations(target, product_descr, product):
    product["associations"] = ["categories"]
    with pytest.raises(InvalidStructureError) as e:
        target(product_descr, product, Operation.CREATE, "1")
    assert e.value.path == "associations"

    product["associations"] = {"categories": [1, 2]}
    with pytest.raises(InvalidStructureError) as e:
        target(product_descr, product, Operation.CREATE, "1")
    assert e.value.path == "associations.categories.category"


def test_missing_properties(target, product_descr, product):
    del product["price"]
    del product["associations"]
    with pytest.raises(MissingPropertiesError) as e:
        target(product_descr, product, Operation.CREATE, "1")
    assert e.value.names == ("price", "associations")
    assert e.value.message == 'missing properties in "product": price, and associations'


def test_missing_id_for_update(target, tag_descr):
    with pytest.raises(MissingPropertiesError) as e:
        target(tag_descr, {"id_lang": 1, "name": "sale"}, Operation.UPDATE, "1")
    assert e.value.names == ("id",)


@pytest.mark.parametrize("value", ["", "   ", None])
def test_required_properties_not_set(target, tag_descr, value):
    with pytest.raises(RequiredPropertiesNotSetError) as e:
        target(tag_descr, {"id_lang": 1, "name": value}, Operation.CREATE, "1")
    assert e.value.names == ("name",)


def test_required_translatable_property_not_set(target, product_descr, product):
    product["name"] = " "
    with pytest.raises(RequiredPropertiesNotSetError) as e:
        target(product_descr, product, Operation.CREATE, "1")
    assert e.value.names == ("name",)


def test_falsy_values_satisfy_required(target, tag_descr):
    root = parse(target(tag_descr, {"id_lang": 0, "name": False}, Operation.CREATE, "1"))
    assert root[0].find("id_lang").text == "0"
    assert root[0].find("name").text == "0"


@pytest.mark.parametrize("id_", [5, "5"])
def test_id_must_be_empty_for_create(target, tag_descr, id_):
    with pytest.raises(IdentifierMismatchError) as e:
        target(tag_descr, {"id": id_, "id_lang": 1, "name": "sale"}, Operation.CREATE, "1")
    assert e.value.operation is Operation.CREATE
    assert e.value.message == 'id must be empty for create in "tag"'


@pytest.mark.parametrize("id_", ["", None, "  "])
def test_id_must_be_set_for_update(target, tag_descr, id_):
    with pytest.raises(IdentifierMismatchError) as e:
        target(tag_descr, {"id": id_, "id_lang": 1, "name": "sale"}, Operation.UPDATE, "1")
    assert e.value.operation is Operation.UPDATE
    assert e.value.message == 'id must be set for update in "tag"'


def test_update(target, tag_descr):
    root = parse(target(tag_descr, {"id": 5, "id_lang": 1, "name": "sale"}, Operation.UPDATE, "1"))
    assert [(c.tag, c.text) for c in root[0]] == [("id", "5"), ("id_lang", "1"), ("name", "sale")]


def test_create_with_empty_id(target, tag_descr):
    instance = {"id": None, "id_lang": 1, "name": "sale"}
    root = parse(target(tag_descr, instance, Operation.CREATE, "1"))
    assert root[0].find("id") is None


def test_escaping(target, tag_descr):
    root = parse(target(tag_descr, {"id_lang": 1, "name": "<b>A & B</b>"}, Operation.CREATE, "1"))
    assert root[0].find("name").text == "<b>A & B</b>"


@pytest.mark.parametrize("value", ["a\x00b", "bell\x07", "\ufffe"])
def test_characters_not_allowed_in_xml(target, tag_descr, value):
    with pytest.raises(InvalidStructureError) as e:
        target(tag_descr, {"id_lang": 1, "name": value}, Operation.CREATE, "1")
    assert e.value.path == "name"


def test_characters_not_allowed_in_xml_in_associations(target, product_descr, product):
    product["associations"]["categories"] = [{"id": "2\x1b"}]
    with pytest.raises(InvalidStructureError) as e:
        target(product_descr, [product], Operation.CREATE, "1")
    assert e.value.path == "associations.categories.category.id"
    assert e.value.index == 0


def test_whitespace_and_non_ascii_are_kept(target, tag_descr):
    document = target(
        tag_descr, {"id_lang": 1, "name": "tab\there\nnext 😀 é"}, Operation.CREATE, "1"
    )
    assert parse(document)[0].find("name").text == "tab\there\nnext 😀 é"


def test_batch(target, tag_descr):
    root = parse(
        target(
            tag_descr,
            [{"id_lang": 1, "name": "sale"}, {"id_lang": 2, "name": "soldes"}],
            Operation.CREATE,
            "1",
        )
    )
    assert [elem.find("name").text for elem in root] == ["sale", "soldes"]


def test_batch_is_all_or_nothing(target, tag_descr):
    with pytest.raises(RequiredPropertiesNotSetError) as e:
        target(
            tag_descr,
            [{"id_lang": 1, "name": "sale"}, {"id_lang": 2, "name": ""}],
            Operation.CREATE,
            "1",
        )
    assert e.value.index == 1
    assert e.value.message == 'required properties not set in "tag" (item #1): name'


def test_single_instance_has_no_index(target, tag_descr):
    with pytest.raises(RequiredPropertiesNotSetError) as e:
        target(tag_descr, {"id_lang": 1, "name": ""}, Operation.CREATE, "1")
    assert e.value.index is None


def test_registered_resource(target):
    from ...resources import CARRIER

    instance = {name: "" for name in CARRIER.field_names}
    instance.update({"name": "Colissimo", "active": True, "delay": "2 days"})
    root = parse(target(CARRIER, instance, Operation.CREATE, "2"))
    assert root[0].find("active").text == "1"
    assert root[0].find("delay/language").attrib["id"] == "2"
    assert root[0].find("delay/language").text == "2 days"
