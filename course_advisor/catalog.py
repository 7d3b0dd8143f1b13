# === catalog.py ===
import duckdb

from course_advisor.course import Course, normalize_code


class CatalogError(Exception):
    pass


class CatalogEmptyError(CatalogError):
    def __init__(self):
        super().__init__("No courses loaded")


class CourseNotFoundError(CatalogError):
    def __init__(self, code):
        super().__init__(f"Course {code} not found")
        self.code = code


class CourseCatalog:
    """In-memory course store backed by a DuckDB connection.

    Rows only live as long as the connection; ``replace`` is the one way
    contents change.
    """

    def __init__(self):
        self.con = duckdb.connect(":memory:")
        self.con.execute("CREATE TABLE courses (course_id TEXT, title TEXT)")
        self.con.execute("CREATE TABLE prerequisites (course_id TEXT, position INTEGER, prereq_id TEXT)")

    def replace(self, courses):
        courses = list({c.code: c for c in courses}.values())  # last duplicate wins
        course_rows = [(c.code, c.title) for c in courses]
        prereq_rows = [
            (c.code, i, prereq)
            for c in courses
            for i, prereq in enumerate(c.prerequisites)
        ]

        self.con.begin()
        try:
            self.con.execute("DELETE FROM prerequisites")
            self.con.execute("DELETE FROM courses")
            if course_rows:
                self.con.executemany("INSERT INTO courses VALUES (?, ?)", course_rows)
            if prereq_rows:
                self.con.executemany("INSERT INTO prerequisites VALUES (?, ?, ?)", prereq_rows)
        except duckdb.Error:
            self.con.rollback()
            raise
        self.con.commit()

    def __len__(self):
        return self.con.execute("SELECT count(*) FROM courses").fetchone()[0]

    def __contains__(self, code):
        row = self.con.execute(
            "SELECT 1 FROM courses WHERE course_id = ?", [normalize_code(code)]
        ).fetchone()
        return row is not None

    def is_empty(self):
        return len(self) == 0

    def _prerequisites(self, code):
        rows = self.con.execute(
            "SELECT prereq_id FROM prerequisites WHERE course_id = ? ORDER BY position", [code]
        ).fetchall()
        return [r[0] for r in rows]

    def list_courses(self):
        if self.is_empty():
            raise CatalogEmptyError()

        rows = self.con.execute("SELECT course_id, title FROM courses ORDER BY course_id").fetchall()
        return [Course(code, title, self._prerequisites(code)) for code, title in rows]

    def lookup(self, raw_code):
        """Find one course, returning ``(course, prerequisite_labels)``.

        A label is the canonical code of the prerequisite's own record, or the
        stored prerequisite string when that record is missing.
        """
        if self.is_empty():
            raise CatalogEmptyError()

        code = normalize_code(raw_code)
        row = self.con.execute("SELECT course_id, title FROM courses WHERE course_id = ?", [code]).fetchone()
        if row is None:
            raise CourseNotFoundError(code)

        course = Course(row[0], row[1], self._prerequisites(code))
        labels = self.con.execute(
            """
            SELECT coalesce(c.course_id, p.prereq_id)
            FROM prerequisites p
            LEFT JOIN courses c ON c.course_id = p.prereq_id
            WHERE p.course_id = ?
            ORDER BY p.position
            """,
            [code],
        ).fetchall()
        return course, [label for (label,) in labels]

    def close(self):
        self.con.close()
