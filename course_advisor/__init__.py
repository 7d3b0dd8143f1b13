from course_advisor.catalog import CatalogEmptyError, CatalogError, CourseCatalog, CourseNotFoundError
from course_advisor.course import Course
from course_advisor.loader import load_catalog
