"""
Input-shape checks done by the front ends before calling the service.

These only catch blank fields and non-numeric ages so the user gets a
quick message; the store's own validation is authoritative.
"""

from collections.abc import Mapping

FIELDS = ("name", "email", "age", "course")


def parse_student_form(data: Mapping[str, str]) -> tuple[dict | None, str | None]:
    """
    Trim and convert submitted student fields.

    Returns:
        (fields, None) on success, with age converted to int,
        or (None, message) describing the first problem found.
    """
    if not isinstance(data, Mapping):
        return None, "Please fill all required fields!"

    values = {
        name: "" if data.get(name) is None else str(data.get(name)).strip()
        for name in FIELDS
    }

    if not all(values.values()):
        return None, "Please fill all required fields!"

    try:
        values["age"] = int(values["age"])
    except ValueError:
        return None, "Please enter a valid number for age!"

    return values, None
