# === main.py ===
import argparse

from course_advisor.catalog import CatalogEmptyError, CourseCatalog, CourseNotFoundError
from course_advisor.config import DEFAULT_CONFIG_PATH, load_config
from course_advisor.loader import load_catalog

INVALID_CHOICE = -1
EXIT_CHOICE = 9

MENU = """
Welcome to the course planner.

  1. Load Data Structure.
  2. Print Course List.
  3. Print Course.
  9. Exit
"""

NOT_LOADED = "No courses loaded. Please load data first using option 1."


def parse_choice(text):
    text = text.strip()
    digits = text[1:] if text[:1] in "+-" else text
    if not digits.isdecimal():
        return INVALID_CHOICE
    return int(text)


def print_course_list(catalog):
    try:
        courses = catalog.list_courses()
    except CatalogEmptyError:
        print(NOT_LOADED)
        return

    print("\nHere is a sample schedule:\n")
    for course in courses:
        print(f"{course.code}, {course.title}")
    print()


def print_course(catalog, code):
    try:
        course, prereqs = catalog.lookup(code)
    except CatalogEmptyError:
        print(NOT_LOADED)
        return
    except CourseNotFoundError as e:
        print(f"Course {e.code} not found.")
        print("Please verify the course number and try again.")
        return

    print(f"{course.code}, {course.title}")
    if prereqs:
        print(f"Prerequisites: {', '.join(prereqs)}")
    else:
        print("Prerequisites: None")


def run_shell(catalog, config, input_func=None):
    input_func = input_func or input
    print("Welcome to the course planner.")

    while True:
        print(MENU)
        try:
            raw = input_func("What would you like to do? ")
        except EOFError:
            print()
            break
        choice = parse_choice(raw)

        if choice == 1:
            try:
                file_name = input_func("Enter the file name: ").strip()
            except EOFError:
                break
            if not file_name:
                file_name = config["default_filename"]
                print(f"Using default filename: {file_name}")
            load_catalog(file_name, catalog, config["delimiter"])

        elif choice == 2:
            print_course_list(catalog)

        elif choice == 3:
            try:
                code = input_func("What course do you want to know about? ")
            except EOFError:
                break
            if code.strip():
                print_course(catalog, code)
            else:
                print("Please enter a valid course number.")

        elif choice == EXIT_CHOICE:
            break

        else:
            shown = raw.strip() if choice == INVALID_CHOICE else choice
            print(f"{shown} is not a valid option.")

    print("Thank you for using the course planner!")


def main(argv=None):
    parser = argparse.ArgumentParser(description="ABCU course advising program")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="JSON config file")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    catalog = CourseCatalog()
    try:
        run_shell(catalog, config)
    finally:
        catalog.close()


if __name__ == "__main__":
    main()
