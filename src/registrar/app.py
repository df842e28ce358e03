from flask import Flask

from registrar.config import config
from registrar.log import configure_logging
from registrar.student import StudentService, create_store


def create_app(service: StudentService | None = None) -> Flask:
    """Application factory. Builds a store from config unless a service is given."""
    configure_logging(config.log_level)

    app = Flask(__name__)
    app.secret_key = config.secret_key

    if service is None:
        service = StudentService(create_store(config))
    app.student_service = service

    # Register blueprints
    from registrar.routes.dashboard import bp as dashboard_bp
    from registrar.routes.students import bp as students_bp

    app.register_blueprint(dashboard_bp)
    app.register_blueprint(students_bp, url_prefix="/api/students")

    @app.route("/api/health")
    def health():
        return {"status": "ok", "backend": app.student_service.store.backend_name}

    return app
