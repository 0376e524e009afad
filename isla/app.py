"""Main Flask application for Isla icon bot."""

# Ensure project root is on sys.path so `shared` imports work
from pathlib import Path
import sys
ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

import logging
import time

from flask import Flask, jsonify, request, g
from werkzeug.middleware.proxy_fix import ProxyFix

from config import Config, ConfigError
from services.icon_cache import icon_cache
from shared.error_handlers import register_error_handlers


# Initialize Flask app
app = Flask(__name__)

# Global startup time for uptime tracking
app.config['START_TIME'] = time.time()


def init_app() -> Flask:
    """
    Initialize and configure the Flask application.

    Returns:
        Configured Flask app instance

    Raises:
        ConfigError: If configuration is invalid
    """
    try:
        config = Config()
        app.config['ISLA_CONFIG'] = config
    except ConfigError as e:
        raise ConfigError(f"Failed to load configuration: {e}") from e

    # Trust proxy headers (nginx forwards X-Forwarded-Proto, X-Forwarded-Host, etc.)
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_prefix=1)

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Same cache as the module-level generate_icon()
    app.config['ICON_CACHE'] = icon_cache
    if config.warm_on_startup:
        rendered = icon_cache.warm()
        logging.getLogger(__name__).info(f"Warmed icon cache with {rendered} icons")

    from api.health import health_bp
    from api.icons import icons_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(icons_bp)

    register_error_handlers(app, logging.getLogger(__name__))

    return app


@app.before_request
def before_request():
    """Store request start time and correlation ID."""
    g.start_time = time.time()
    g.correlation_id = request.headers.get('X-Correlation-Id', 'none')


@app.after_request
def after_request(response):
    """Log request details after completion."""
    if hasattr(g, 'start_time'):
        duration_ms = (time.time() - g.start_time) * 1000
        logging.info(
            f"{request.method} {request.path} - "
            f"Status: {response.status_code} - "
            f"Duration: {duration_ms:.2f}ms - "
            f"Correlation-ID: {g.correlation_id}"
        )
    return response


@app.route('/info')
def info():
    """Bot information endpoint."""
    config = app.config['ISLA_CONFIG']
    return jsonify({
        'name': config.name,
        'description': config.description,
        'version': config.version,
        'emoji': config.emoji,
        'endpoints': {
            'icons': {
                'GET /assets/icons/<name>': 'PNG icon from the catalog',
                'GET /api/icons': 'List the icon catalog',
                'GET /ck-wallet-manifest.v1.webmanifest': 'Web app manifest'
            },
            'system': {
                '/health': 'Health check with icon cache counters',
                '/info': 'Bot information'
            }
        }
    })


@app.route('/robots.txt')
def robots():
    """Robots.txt to prevent search engine indexing."""
    return '''User-agent: *
Disallow: /
''', 200, {'Content-Type': 'text/plain'}


# Initialize the app
init_app()


if __name__ == '__main__':
    config = app.config['ISLA_CONFIG']
    print("\n" + "="*50)
    print(f"{config.emoji} Hi! I'm Isla")
    print("   I draw the wallet icons")
    print(f"   Running on http://localhost:{config.server_port}")
    print("="*50 + "\n")

    app.run(
        host=config.server_host,
        port=config.server_port,
        debug=False
    )
