from flask import Blueprint, current_app, jsonify, request

from registrar.forms import parse_student_form
from registrar.student import ErrorKind

bp = Blueprint("students", __name__)

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
}


def _service():
    return current_app.student_service


def _error(result):
    return jsonify({"error": result.message, "kind": result.kind.value}), STATUS_BY_KIND[result.kind]


@bp.route("", methods=["GET"])
def list_students():
    """List students, optionally searched by name or filtered by course."""
    query = request.args.get("q")
    course = request.args.get("course")

    if query:
        students = _service().search_by_name(query)
    elif course:
        students = _service().filter_by_course(course)
    else:
        students = _service().get_all()
    return jsonify([s.to_dict() for s in students])


@bp.route("", methods=["POST"])
def create_student():
    """Create a new student."""
    fields, message = parse_student_form(request.get_json() or {})
    if message:
        return jsonify({"error": message, "kind": ErrorKind.VALIDATION.value}), 400

    result = _service().add(**fields)
    if not result.ok:
        return _error(result)

    student = _service().get_by_id(result.value)
    if not student:
        return jsonify({"error": "Student not found"}), 404
    return jsonify(student.to_dict()), 201


@bp.route("/stats", methods=["GET"])
def statistics():
    return jsonify(_service().statistics().to_dict())


@bp.route("/<int:student_id>", methods=["GET"])
def get_student(student_id: int):
    """Get student by ID."""
    student = _service().get_by_id(student_id)
    if not student:
        return jsonify({"error": "Student not found"}), 404
    return jsonify(student.to_dict())


@bp.route("/<int:student_id>", methods=["PUT"])
def update_student(student_id: int):
    """Replace all fields of a student."""
    fields, message = parse_student_form(request.get_json() or {})
    if message:
        return jsonify({"error": message, "kind": ErrorKind.VALIDATION.value}), 400

    result = _service().update(student_id, **fields)
    if not result.ok:
        return _error(result)
    return jsonify(result.value.to_dict())


@bp.route("/<int:student_id>", methods=["DELETE"])
def delete_student(student_id: int):
    result = _service().delete(student_id)
    if not result.ok:
        return _error(result)
    return "", 204
