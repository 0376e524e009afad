"""
Shared error handlers for Flask bots.

Usage:
    from shared.error_handlers import register_error_handlers
    register_error_handlers(app, logger)

For API requests (Accept: application/json or X-API-Key header) the handlers
return JSON. Browsers get a small HTML page.
"""

import logging
from flask import jsonify, request, render_template_string


# Simple HTML error template (no JS, just a div)
ERROR_TEMPLATE = '''
<!DOCTYPE html>
<html>
<head>
    <title>{{ title }}</title>
    <style>
        body { font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif;
               max-width: 600px; margin: 80px auto; padding: 20px; text-align: center; }
        .error-box { background: #fafafa; border: 1px solid #c7c3f0; border-radius: 8px;
                     padding: 30px; margin: 20px 0; }
        h1 { color: #2d2a6a; margin: 0 0 10px 0; }
        p { color: #0f172a; margin: 0; }
    </style>
</head>
<body>
    <div class="error-box">
        <h1>{{ code }} - {{ title }}</h1>
        <p>{{ message }}</p>
    </div>
</body>
</html>
'''

# code -> (title, message)
ERROR_MESSAGES = {
    400: ('Bad Request', 'The request was invalid or malformed.'),
    404: ('Not Found', 'The requested resource could not be found.'),
    405: ('Method Not Allowed', 'This method is not allowed for this endpoint.'),
    500: ('Internal Server Error', 'An unexpected error occurred. Please try again later.'),
}


def _wants_json():
    """Check if the request expects a JSON response."""
    if request.headers.get('X-API-Key'):
        return True
    if request.path.startswith('/api/'):
        return True
    best = request.accept_mimetypes.best_match(['application/json', 'text/html'])
    return best == 'application/json'


def error_response(code, message=None):
    """Return a JSON or HTML error response for the given status code."""
    title, default_message = ERROR_MESSAGES.get(code, ('Error', 'Something went wrong.'))
    message = message or default_message
    if _wants_json():
        return jsonify({'error': message, 'status': code}), code
    return render_template_string(
        ERROR_TEMPLATE,
        code=code,
        title=title,
        message=message
    ), code


def register_error_handlers(app, logger=None):
    """
    Register standard error handlers on a Flask app.

    Args:
        app: Flask application instance
        logger: Optional logger instance. If not provided, uses module-level logger.
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    @app.errorhandler(400)
    def bad_request(error):
        """Handle 400 Bad Request"""
        return error_response(400)

    @app.errorhandler(404)
    def not_found(error):
        """Handle 404 Not Found"""
        return error_response(404, getattr(error, 'description', None))

    @app.errorhandler(405)
    def method_not_allowed(error):
        """Handle 405 Method Not Allowed"""
        return error_response(405, f'The {request.method} method is not allowed for this endpoint.')

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 Internal Server Error"""
        original = getattr(error, 'original_exception', None) or error
        logger.error(f"Internal server error on {request.path}: {original}", exc_info=original)
        return error_response(500)
