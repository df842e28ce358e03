#!/usr/bin/env python3
"""Registrar CLI for managing student records."""

import argparse

import questionary
from rich.console import Console
from rich.table import Table

from registrar.config import config
from registrar.forms import parse_student_form
from registrar.log import configure_logging
from registrar.student import Student, StudentService, create_store

console = Console()


def render_students(students: list[Student], title: str = "Students") -> None:
    """Print students as a table."""
    if not students:
        console.print("[yellow]No students found.[/]")
        return

    table = Table(title=title)
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("Email")
    table.add_column("Age", justify="right")
    table.add_column("Course")
    for s in students:
        table.add_row(str(s.id), s.name, s.email, str(s.age), s.course)
    console.print(table)


def prompt_fields(current: Student | None = None) -> dict | None:
    """Ask for the four student fields. Returns None if the user cancels."""
    answers = questionary.form(
        name=questionary.text("Name:", default=current.name if current else ""),
        email=questionary.text("Email:", default=current.email if current else ""),
        age=questionary.text("Age:", default=str(current.age) if current else ""),
        course=questionary.text("Course:", default=current.course if current else ""),
    ).ask()
    if not answers:
        return None

    fields, message = parse_student_form(answers)
    if message:
        console.print(f"[red]{message}[/]")
        return None
    return fields


def select_student(service: StudentService) -> Student | None:
    """Prompt the user to select a student from the full list."""
    students = service.get_all()
    if not students:
        console.print("[red]No students found.[/]")
        return None
    return questionary.select(
        "Select a student:",
        choices=[
            questionary.Choice(title=f"{s.id}: {s.name} ({s.email})", value=s) for s in students
        ],
    ).ask()


def list_students(service: StudentService) -> None:
    students = service.get_all()
    render_students(students)
    console.print(f"[dim]Loaded {len(students)} students[/]")


def add_student(service: StudentService) -> None:
    """Add a student from prompted fields."""
    fields = prompt_fields()
    if not fields:
        return

    result = service.add(**fields)
    if result.ok:
        console.print(f"[green]Student added: {fields['name']} (id={result.value})[/]")
    else:
        console.print(f"[red]{result.message}[/]")


def update_student(service: StudentService) -> None:
    """Replace the fields of a selected student."""
    student = select_student(service)
    if not student:
        return

    fields = prompt_fields(student)
    if not fields:
        return

    result = service.update(student.id, **fields)
    if result.ok:
        console.print(f"[green]Student updated: {result.value.name}[/]")
    else:
        console.print(f"[red]{result.message}[/]")


def delete_student(service: StudentService) -> None:
    """Delete a selected student after confirmation."""
    student = select_student(service)
    if not student:
        return

    if not questionary.confirm(f"Are you sure you want to delete {student.name}?").ask():
        console.print("[dim]Cancelled.[/]")
        return

    result = service.delete(student.id)
    if result.ok:
        console.print(f"[green]Student deleted: {student.name}[/]")
    else:
        console.print(f"[red]{result.message}[/]")


def search_students(service: StudentService, query: str | None = None) -> None:
    if query is None:
        query = questionary.text("Search name:").ask()
        if query is None:
            return

    query = query.strip()
    if not query:
        list_students(service)
        return

    students = service.search_by_name(query)
    render_students(students, title=f"Name matches: {query}")
    console.print(f"[dim]Found {len(students)} students matching: {query}[/]")


def filter_students(service: StudentService, course: str | None = None) -> None:
    if course is None:
        course = questionary.select(
            "Course:", choices=["All Courses"] + service.courses()
        ).ask()
        if course is None:
            return

    if course == "All Courses":
        list_students(service)
        return

    students = service.filter_by_course(course)
    render_students(students, title=f"Course: {course}")
    console.print(f"[dim]Showing {len(students)} students in: {course}[/]")


def show_statistics(service: StudentService) -> None:
    stats = service.statistics()
    console.print("[bold]=== STUDENT STATISTICS ===[/]")
    console.print(f"Total Students: {stats.total_count}")
    console.print(f"Average Age: {stats.average_age:.1f}")
    console.print("Course Distribution:")
    for course, count in sorted(stats.course_distribution.items()):
        console.print(f"  - {course}: {count} students")


def clear_students(service: StudentService) -> None:
    if not questionary.confirm("Remove ALL students and reset ids?", default=False).ask():
        console.print("[dim]Cancelled.[/]")
        return
    service.clear()
    console.print("[green]All students removed.[/]")


def serve(service: StudentService, host: str, port: int) -> None:
    from registrar.app import create_app

    create_app(service).run(host=host, port=port)


MENU_ACTIONS = {
    "List students": list_students,
    "Add student": add_student,
    "Update student": update_student,
    "Delete student": delete_student,
    "Search by name": search_students,
    "Filter by course": filter_students,
    "Statistics": show_statistics,
}


ONE_SHOT_MUTATIONS = ("add", "update", "delete", "clear")


def menu(service: StudentService) -> None:
    """Interactive loop until the user quits."""
    while True:
        choice = questionary.select("What would you like to do?", choices=[*MENU_ACTIONS, "Quit"]).ask()
        # User pressed Ctrl+C, Escape or chose Quit
        if choice is None or choice == "Quit":
            return
        MENU_ACTIONS[choice](service)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Registrar CLI",
        epilog=(
            "With the default memory backend, changes made by add, update, delete "
            "and clear are lost when the command exits. Use the menu or serve "
            "commands, or REGISTRAR_BACKEND=postgres, to keep them."
        ),
    )
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("menu", help="Interactive menu (default)")
    subparsers.add_parser("list", help="List all students")
    subparsers.add_parser("add", help="Add a student (not kept on the memory backend)")
    subparsers.add_parser("update", help="Update a student (not kept on the memory backend)")
    subparsers.add_parser("delete", help="Delete a student (not kept on the memory backend)")
    search = subparsers.add_parser("search", help="Search students by name")
    search.add_argument("query", nargs="?")
    filter_ = subparsers.add_parser("filter", help="Filter students by course")
    filter_.add_argument("course", nargs="?")
    subparsers.add_parser("stats", help="Show statistics")
    subparsers.add_parser("clear", help="Remove all students (not kept on the memory backend)")
    serve_parser = subparsers.add_parser("serve", help="Run the web UI")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=5000)

    args = parser.parse_args(argv)

    configure_logging(config.log_level)
    service = StudentService(create_store(config))

    if args.command in ONE_SHOT_MUTATIONS and service.store.backend_name == "memory":
        console.print(
            "[yellow]Memory backend: this change is discarded when the command exits.[/]"
        )

    if args.command in (None, "menu"):
        menu(service)
    elif args.command == "list":
        list_students(service)
    elif args.command == "add":
        add_student(service)
    elif args.command == "update":
        update_student(service)
    elif args.command == "delete":
        delete_student(service)
    elif args.command == "search":
        search_students(service, args.query)
    elif args.command == "filter":
        filter_students(service, args.course)
    elif args.command == "stats":
        show_statistics(service)
    elif args.command == "clear":
        clear_students(service)
    elif args.command == "serve":
        serve(service, args.host, args.port)


if __name__ == "__main__":
    main()
