"""
Flask Application Factory - HK Primary School Navigator API

Single-user admissions navigator: a fixed school catalog plus a per-user
overlay (follows, monitors, progress, notes, custom schools) kept in a
local SQL key-value table, and model-backed advisory endpoints.

Startup loads the overlay once into a TrackerSession; every mutation
afterwards goes through TrackerSession.dispatch.
"""

import logging
import os

from flask import Flask, jsonify
from flask_cors import CORS
from sqlalchemy import text

from config import Config
from models.database import db

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] [%(request_id)s] %(message)s"


def _configure_logging(app: Flask) -> None:
    from api.middleware import RequestIdFilter

    logging.basicConfig(level=app.config.get('LOG_LEVEL', 'INFO'), format=LOG_FORMAT)
    for handler in logging.getLogger().handlers:
        if not any(isinstance(f, RequestIdFilter) for f in handler.filters):
            handler.addFilter(RequestIdFilter())


def create_app(config_overrides=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    _configure_logging(app)

    # Local front end talks to /api/* from another origin
    CORS(app,
         resources={r"/api/*": {"origins": "*"}},
         methods=["GET", "POST", "OPTIONS", "PUT", "DELETE"],
         allow_headers=["Content-Type", "X-Request-ID"],
         expose_headers=["X-Request-ID", "Content-Disposition"],
         supports_credentials=False,
         send_wildcard=True)

    # === API MIDDLEWARE ===
    from api.middleware import setup_error_handlers, setup_request_id_middleware
    setup_request_id_middleware(app)
    setup_error_handlers(app)

    # Initialize SQLAlchemy
    db.init_app(app)

    # Rate limiter protects the model-backed endpoints
    from utils.rate_limiter import RATE_LIMITS, init_limiter
    limiter = init_limiter(app)
    app.limiter = limiter  # Store for route access

    # Create the slice table and load the tracker overlay once
    from services.ai_service import AdvisoryService
    from services.catalog import get_base_schools
    from services.session import TrackerSession
    from services.storage import SliceStore

    with app.app_context():
        from models.stored_slice import StoredSlice  # noqa: F401

        db.create_all()
        session = TrackerSession(get_base_schools(), lambda: SliceStore(db.session))
        session.load()

    app.extensions['tracker_session'] = session
    app.extensions['advisory_service'] = AdvisoryService(
        api_key=app.config.get('ANTHROPIC_API_KEY') or '',
        model=app.config.get('AI_MODEL'),
    )
    logger.info(
        f"Navigator ready: {len(session.catalog)} schools, "
        f"database={app.config['SQLALCHEMY_DATABASE_URI']}"
    )

    # Register routes
    from routes.schools import schools_bp
    app.register_blueprint(schools_bp, url_prefix='/api')

    from routes.tracking import tracking_bp
    app.register_blueprint(tracking_bp, url_prefix='/api')

    from routes.dashboard import dashboard_bp
    app.register_blueprint(dashboard_bp, url_prefix='/api')

    from routes.advisor import advisor_bp
    limiter.limit(RATE_LIMITS["advisor"])(advisor_bp)
    app.register_blueprint(advisor_bp, url_prefix='/api/advisor')

    @app.route("/api/ping", methods=["GET"])
    def ping():
        return jsonify({"status": "ok"})

    @app.route("/api/health", methods=["GET"])
    def health():
        current = app.extensions['tracker_session']
        try:
            db.session.execute(text("SELECT 1"))
            database_ok = True
        except Exception as e:
            logger.warning(f"Health check database probe failed: {e}")
            database_ok = False

        return jsonify({
            "status": "ok" if database_ok else "degraded",
            "database": database_ok,
            "schoolCount": len(current.catalog),
            "followedCount": len(current.state.followed_ids),
            "advisorConfigured": app.extensions['advisory_service'].configured,
        }), 200 if database_ok else 503

    return app


def run_app():
    """Main entry point for local development - starts server with Flask's dev server."""
    app = create_app()
    port = int(os.getenv('PORT', '5000'))
    logger.info(f"Starting navigator API on port {port}")
    app.run(debug=app.config.get('DEBUG', False), host="0.0.0.0", port=port)


if __name__ == "__main__":
    run_app()
