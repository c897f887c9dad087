import pytest

from ..querying import FULL, SearchCriteria


def test_default():
    criteria = SearchCriteria()
    assert criteria.is_full
    assert criteria.to_params() == {"display": FULL}


def test_summary():
    criteria = SearchCriteria(display=None)
    assert not criteria.is_full
    assert criteria.to_params() == {}


def test_display_subset():
    criteria = SearchCriteria(display=["id", "name"])
    assert not criteria.is_full
    assert criteria.to_params() == {"display": "[id,name]"}


@pytest.mark.parametrize(
    "value, expected",
    [
        ("Paris", "[Paris]"),
        (3, "[3]"),
        ([1, 5, 9], "[1|5|9]"),
        (("FR", "BE"), "[FR|BE]"),
        ("[1,10]", "[1,10]"),
        ("%[shirt]%", "%[shirt]%"),
    ],
)
def test_filters(value, expected):
    criteria = SearchCriteria(filters={"city": value})
    assert criteria.to_params()["filter[city]"] == expected


def test_sort():
    criteria = SearchCriteria(sort=["name_ASC", "id_DESC"])
    assert criteria.to_params()["sort"] == "[name_ASC,id_DESC]"


def test_limit():
    assert SearchCriteria(limit=20).to_params()["limit"] == "20"
    assert SearchCriteria(limit=20, offset=40).to_params()["limit"] == "40,20"


def test_offset_requires_limit():
    with pytest.raises(ValueError):
        SearchCriteria(offset=40).to_params()
