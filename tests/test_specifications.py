"""Tests for exact-match filter specifications."""

from aidb.domain.models import Document, DocumentMetadata
from aidb.domain.specifications import DataMatchSpecification, ExactMatchSpecification, strict_equals


def test_strict_equals_scalars():
    assert strict_equals("x", "x")
    assert not strict_equals("x", "y")
    assert strict_equals(3, 3.0)
    assert not strict_equals("1", 1)
    assert strict_equals(None, None)


def test_strict_equals_booleans_do_not_match_numbers():
    assert strict_equals(True, True)
    assert not strict_equals(True, 1)
    assert not strict_equals(0, False)


def test_strict_equals_nan_never_matches():
    nan = float("nan")
    assert not strict_equals(nan, nan)


def test_strict_equals_containers_match_by_identity_only():
    data = {"key": "value"}
    assert strict_equals(data, data)
    assert not strict_equals(data, {"key": "value"})
    assert not strict_equals([1, 2], [1, 2])


def test_exact_match_on_top_level_fields():
    doc = Document(id="a", content="c", type="x")
    assert ExactMatchSpecification({"type": "x"}).is_satisfied_by(doc)
    assert ExactMatchSpecification({"type": "x", "id": "a"}).is_satisfied_by(doc)
    assert not ExactMatchSpecification({"type": "y"}).is_satisfied_by(doc)


def test_empty_filter_matches_everything():
    doc = Document(id="a")
    assert ExactMatchSpecification(None).is_satisfied_by(doc)
    assert ExactMatchSpecification({}).is_satisfied_by(doc)


def test_missing_field_fails_filter():
    doc = Document(id="a", content="c")
    assert not ExactMatchSpecification({"synthetic": None}).is_satisfied_by(doc)
    assert not ExactMatchSpecification({"author": "someone"}).is_satisfied_by(doc)


def test_extra_fields_are_filterable():
    doc = Document(id="a", content="c", author="ada", rank=2)
    assert ExactMatchSpecification({"author": "ada", "rank": 2}).is_satisfied_by(doc)
    assert not ExactMatchSpecification({"author": "bob"}).is_satisfied_by(doc)


def test_nested_model_field_only_matches_itself():
    metadata = DocumentMetadata(model="m")
    doc = Document(id="a", metadata=metadata)
    assert ExactMatchSpecification({"metadata": doc.metadata}).is_satisfied_by(doc)
    assert not ExactMatchSpecification({"metadata": DocumentMetadata(model="m")}).is_satisfied_by(doc)


def test_data_match_uses_data_attributes():
    doc = Document(id="a", type="x", data={"key": "value1"})
    assert DataMatchSpecification({"key": "value1"}).is_satisfied_by(doc)
    assert not DataMatchSpecification({"key": "value2"}).is_satisfied_by(doc)
    assert not DataMatchSpecification({"type": "x"}).is_satisfied_by(doc)
