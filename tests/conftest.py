import pytest

from course_advisor.catalog import CourseCatalog

SAMPLE = """\
MATH201,Discrete Mathematics
CSCI300,Introduction to Algorithms,CSCI200,MATH201
CSCI350,Operating Systems,CSCI300
CSCI101,Introduction to Programming in C++,CSCI100
CSCI100,Introduction to Computer Science
CSCI301,Advanced Programming in C++,CSCI101
CSCI400,Large Software Development,CSCI301,CSCI350
CSCI200,Data Structures,CSCI101
"""


@pytest.fixture
def catalog():
    cat = CourseCatalog()
    yield cat
    cat.close()


@pytest.fixture
def write_courses(tmp_path):
    def _write(text, name="courses.csv"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def sample_file(write_courses):
    return write_courses(SAMPLE)
