# === loader.py ===
from course_advisor.course import Course, normalize_code


def read_lines(path):
    # Records end at "\n" (or "\r\n") only; other control characters stay in the field
    with open(path, encoding="utf-8", newline="") as f:
        return [line[:-1] if line.endswith("\r") else line for line in f.read().split("\n")]


def split_fields(line, delimiter=","):
    return [part.strip() for part in line.split(delimiter)]


def harvest_course_codes(lines, delimiter=","):
    # Pass 1: first field of every non-blank line, so prerequisites may point forward
    known = set()
    for line in lines:
        if not line.strip():
            continue
        code = normalize_code(split_fields(line, delimiter)[0])
        if code:
            known.add(code)
    return known


def parse_courses(lines, known_codes, delimiter=","):
    # Pass 2: build records, dropping bad lines and unknown prerequisites
    courses = {}
    for line_no, line in enumerate(lines, 1):
        if not line.strip():
            continue

        parts = split_fields(line, delimiter)
        if len(parts) < 2:
            print(f"⚠️ Warning: Line {line_no} has insufficient data, skipping.")
            continue

        code = normalize_code(parts[0])
        title = parts[1]
        if not code or not title:
            print(f"⚠️ Warning: Line {line_no} has empty course number or title, skipping.")
            continue

        course = Course(code, title)
        for prereq in parts[2:]:
            if not prereq:
                continue
            prereq = normalize_code(prereq)
            if prereq in known_codes:
                course.prerequisites.append(prereq)
            else:
                print(f"⚠️ Warning: Prerequisite {prereq} for course {code} not found in course list.")

        courses[code] = course

    return courses


def load_catalog(path, catalog, delimiter=","):
    """Load a course file into ``catalog``, replacing whatever it held.

    Returns False when the file can't be read (catalog untouched) or when no
    line produced a course (catalog left empty).
    """
    try:
        lines = read_lines(path)
    except (OSError, UnicodeDecodeError) as e:
        print(f"[ERROR] Could not open file {path}: {e}")
        print("Please make sure the file exists and try again.")
        return False

    known_codes = harvest_course_codes(lines, delimiter)
    courses = parse_courses(lines, known_codes, delimiter)
    catalog.replace(courses.values())

    if not courses:
        print("[ERROR] No valid courses were loaded from the file.")
        return False

    print(f"✅ Data loaded successfully! {len(courses)} courses loaded.")
    return True
