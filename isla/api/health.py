"""Health check endpoints for Isla."""

import time

from flask import Blueprint, current_app, jsonify


health_bp = Blueprint('health', __name__)


@health_bp.route('/health', methods=['GET'])
def health():
    """
    Basic health check endpoint.

    Returns:
        JSON with status, name, version, uptime and icon cache counters
    """
    config = current_app.config['ISLA_CONFIG']
    icon_cache = current_app.config['ICON_CACHE']
    uptime_seconds = time.time() - current_app.config['START_TIME']

    return jsonify({
        'status': 'ok',
        'name': config.name,
        'version': config.version,
        'uptime_seconds': round(uptime_seconds, 2),
        'icons': icon_cache.stats()
    }), 200
