from flask import Blueprint, current_app, flash, redirect, render_template, request, url_for

from registrar.forms import parse_student_form
from registrar.student.seed import SAMPLE_COURSES

bp = Blueprint("dashboard", __name__)

ALL_COURSES = "All Courses"


def _course_choices(service) -> list[str]:
    courses = list(SAMPLE_COURSES)
    courses += [c for c in service.courses() if c not in courses]
    return [ALL_COURSES] + courses


@bp.route("/")
def index():
    service = current_app.student_service
    query = request.args.get("q", "").strip()
    course = request.args.get("course", ALL_COURSES)

    if query:
        students = service.search_by_name(query)
        status = f"Found {len(students)} students matching: {query}"
    elif course and course != ALL_COURSES:
        students = service.filter_by_course(course)
        status = f"Showing {len(students)} students in: {course}"
    else:
        students = service.get_all()
        status = f"Loaded {len(students)} students"

    selected = None
    edit_id = request.args.get("edit", type=int)
    if edit_id is not None:
        selected = service.get_by_id(edit_id)
        if selected is None:
            flash(f"Student not found with ID: {edit_id}", "error")
        else:
            status = f"Selected student: {selected.name}"

    return render_template(
        "index.html",
        students=students,
        selected=selected,
        query=query,
        course=course,
        courses=_course_choices(service),
        status=status,
    )


@bp.route("/students", methods=["POST"])
def add_student():
    fields, message = parse_student_form(request.form)
    if message:
        flash(message, "error")
        return redirect(url_for("dashboard.index"))

    result = current_app.student_service.add(**fields)
    if result.ok:
        flash(f"Student added: {fields['name']}", "success")
    else:
        flash(result.message, "error")
    return redirect(url_for("dashboard.index"))


@bp.route("/students/<int:student_id>", methods=["POST"])
def update_student(student_id: int):
    fields, message = parse_student_form(request.form)
    if message:
        flash(message, "error")
        return redirect(url_for("dashboard.index", edit=student_id))

    result = current_app.student_service.update(student_id, **fields)
    if result.ok:
        flash(f"Student updated: {fields['name']}", "success")
        return redirect(url_for("dashboard.index"))
    flash(result.message, "error")
    return redirect(url_for("dashboard.index", edit=student_id))


@bp.route("/students/<int:student_id>/delete", methods=["POST"])
def delete_student(student_id: int):
    result = current_app.student_service.delete(student_id)
    if result.ok:
        flash(f"Student deleted: {student_id}", "success")
    else:
        flash(result.message, "error")
    return redirect(url_for("dashboard.index"))


@bp.route("/stats")
def stats():
    return render_template("stats.html", stats=current_app.student_service.statistics())
