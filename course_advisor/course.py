# === course.py ===
def normalize_code(code):
    return code.strip().upper()


class Course:
    def __init__(self, code, title, prerequisites=None):
        self.code = code  # normalized, e.g. "CSCI200"
        self.title = title
        self.prerequisites = list(prerequisites or [])  # list of course codes, file order

    def __eq__(self, other):
        if not isinstance(other, Course):
            return NotImplemented
        return (self.code, self.title, self.prerequisites) == (other.code, other.title, other.prerequisites)

    def __repr__(self):
        return f"Course({self.code!r}, {self.title!r}, {self.prerequisites!r})"
