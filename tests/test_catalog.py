import pytest

from course_advisor.catalog import CatalogEmptyError, CatalogError, CourseNotFoundError
from course_advisor.course import Course
from course_advisor.loader import load_catalog


def test_list_on_empty_catalog(catalog):
    with pytest.raises(CatalogEmptyError):
        catalog.list_courses()


def test_list_is_sorted(catalog, sample_file):
    load_catalog(sample_file, catalog)
    codes = [c.code for c in catalog.list_courses()]
    assert codes == sorted(codes)
    assert codes[0] == "CSCI100"
    assert codes[-1] == "MATH201"


def test_list_uses_codepoint_order(catalog):
    catalog.replace([Course("CS10", "b"), Course("CS2", "c"), Course("CS1", "a"), Course("C_1", "d")])
    assert [c.code for c in catalog.list_courses()] == ["CS1", "CS10", "CS2", "C_1"]


def test_list_carries_prerequisites(catalog, sample_file):
    load_catalog(sample_file, catalog)
    by_code = {c.code: c for c in catalog.list_courses()}
    assert by_code["CSCI400"].prerequisites == ["CSCI301", "CSCI350"]
    assert by_code["CSCI100"].prerequisites == []


def test_lookup_hit(catalog, sample_file):
    load_catalog(sample_file, catalog)
    course, prereqs = catalog.lookup("  csci300 ")
    assert course.code == "CSCI300"
    assert course.title == "Introduction to Algorithms"
    assert prereqs == ["CSCI200", "MATH201"]


def test_lookup_empty_vs_not_found(catalog, sample_file):
    with pytest.raises(CatalogEmptyError):
        catalog.lookup("CSCI100")

    load_catalog(sample_file, catalog)
    with pytest.raises(CourseNotFoundError) as exc:
        catalog.lookup("csci999")
    assert exc.value.code == "CSCI999"
    assert not isinstance(exc.value, CatalogEmptyError)
    assert isinstance(exc.value, CatalogError)


def test_lookup_falls_back_to_stored_prerequisite(catalog):
    catalog.replace([Course("CS201", "Data Structures", ["CS101", "CS999"]), Course("CS101", "Intro")])
    course, prereqs = catalog.lookup("CS201")
    assert course.prerequisites == ["CS101", "CS999"]
    assert prereqs == ["CS101", "CS999"]


def test_replace_with_nothing_empties(catalog, sample_file):
    load_catalog(sample_file, catalog)
    catalog.replace([])
    assert catalog.is_empty()
    assert len(catalog) == 0


def test_contains_normalizes(catalog, sample_file):
    load_catalog(sample_file, catalog)
    assert "csci100" in catalog
    assert " MATH201 " in catalog
    assert "CSCI999" not in catalog
