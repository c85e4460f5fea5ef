"""Multi-tenant prize draw web application."""

from __future__ import annotations

from dotenv import load_dotenv
from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix


def create_app(config_object: object | None = None) -> Flask:
    """Application factory.

    Args:
        config_object: Optional config class/object; resolved from APP_ENV
            when omitted.

    Returns:
        Configured Flask application.
    """
    load_dotenv()

    from prizedraw.config import get_config
    from prizedraw.error_handlers import register_error_handlers
    from prizedraw.logging_config import configure_logging
    from prizedraw.repositories.session_store import SessionStore
    from prizedraw.routes.draw import draw_bp
    from prizedraw.routes.health import health_bp
    from prizedraw.routes.participants import participants_bp
    from prizedraw.routes.prizes import prizes_bp
    from prizedraw.routes.tenant import tenant_bp
    from prizedraw.routes.web import web_bp
    from prizedraw.scheduler import init_scheduler
    from prizedraw.services.draw_service import DrawService, create_rng
    from prizedraw.services.lottery_service import LotteryService
    from prizedraw.tenancy import init_tenancy

    app = Flask(__name__)
    app.config.from_object(config_object or get_config())

    if app.config.get("PROXY_FIX_HOPS"):
        # Tenant ids embed the client IP, so honour X-Forwarded-For behind a proxy.
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=int(app.config["PROXY_FIX_HOPS"]))  # type: ignore[method-assign]

    configure_logging(app)
    register_error_handlers(app)
    init_tenancy(app)

    service = LotteryService(
        store=SessionStore(),
        draw_service=DrawService(rng=create_rng(app.config.get("RANDOM_SEED"))),
        max_idle_seconds=float(app.config["SESSION_MAX_IDLE_SECONDS"]),
    )
    app.extensions["lottery_service"] = service
    init_scheduler(app, service)

    app.register_blueprint(health_bp)
    app.register_blueprint(tenant_bp)
    app.register_blueprint(web_bp)
    app.register_blueprint(prizes_bp)
    app.register_blueprint(participants_bp)
    app.register_blueprint(draw_bp)

    return app
