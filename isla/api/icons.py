"""Icon endpoints for Isla."""

import logging

from flask import Blueprint, Response, abort, current_app, jsonify, url_for

from services.palette import BRAND
from services.registry import ICON_SPECS, icon_purpose


logger = logging.getLogger(__name__)

icons_bp = Blueprint('icons', __name__)

MANIFEST_FILENAME = 'ck-wallet-manifest.v1.webmanifest'


@icons_bp.route('/assets/icons/<icon_name>', methods=['GET'])
def get_icon(icon_name):
    """
    Serve a catalog icon as PNG.

    Returns:
        200: PNG bytes with long-lived cache headers
        404: Unknown icon name
    """
    icon_cache = current_app.config['ICON_CACHE']
    if not icon_cache.known(icon_name):
        logger.info(f"Unknown icon requested: {icon_name}")
        abort(404, description=f"Unknown icon: {icon_name}")

    png = icon_cache.generate(icon_name)
    if png is None:
        abort(404, description=f"Unknown icon: {icon_name}")

    response = Response(png, mimetype='image/png')
    response.headers['Cache-Control'] = current_app.config['ISLA_CONFIG'].cache_control
    return response


@icons_bp.route('/api/icons', methods=['GET'])
def list_icons():
    """
    List the icon catalog.

    Returns:
        JSON with one entry per icon, in catalog order
    """
    icons = [
        {
            'name': name,
            'size': spec.size,
            'maskable': spec.maskable,
            'apple': spec.apple,
            'url': url_for('icons.get_icon', icon_name=name),
        }
        for name, spec in ICON_SPECS.items()
    ]
    return jsonify({'icons': icons, 'count': len(icons)})


@icons_bp.route(f'/{MANIFEST_FILENAME}', methods=['GET'])
def manifest():
    """Web app manifest listing the home-screen icons (Apple touch icons are linked from HTML instead)."""
    config = current_app.config['ISLA_CONFIG']
    body = dict(config.manifest)
    body['theme_color'] = BRAND['primary'].to_hex()
    body['background_color'] = BRAND['background'].to_hex()
    body['icons'] = [
        {
            'src': url_for('icons.get_icon', icon_name=name),
            'sizes': f"{spec.size}x{spec.size}",
            'type': 'image/png',
            'purpose': icon_purpose(spec),
        }
        for name, spec in ICON_SPECS.items()
        if not spec.apple
    ]

    response = jsonify(body)
    response.mimetype = 'application/manifest+json'
    response.headers['Cache-Control'] = config.cache_control
    return response
