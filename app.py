"""
Portfolio Showcase - Main Application Entry Point
Application Factory Pattern

This module initializes the Flask application with the content backend client,
configuration and error handling. All route handling is delegated to blueprints.
"""

import os
from flask import Flask, render_template, request, jsonify
from config import get_config
from extensions import init_extensions

from blueprints.portfolio import portfolio_bp
from blueprints.dashboard import dashboard_bp


def create_app(config_name=None, client=None, **overrides):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)
        client (ContentClient): Backend client to use instead of a new one
        **overrides: Config values applied after the selected configuration

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    conf = get_config(config_name)
    app.config.from_object(conf)
    app.config.update(overrides)

    # Initialize extensions with app
    initialize_extensions(app, client)

    # Register Jinja filters
    from utils.helpers import social_icon
    app.jinja_env.filters['social_icon'] = social_icon

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio application is running'}, 200

    return app


def initialize_extensions(app, client=None):
    """Initialize extensions with the app instance"""
    content_client = init_extensions(app, client)
    app.logger.info(f"✓ Content backend: {content_client.base_url}")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(portfolio_bp)
    app.register_blueprint(dashboard_bp)


def _wants_json():
    return (request.path.startswith('/admin/') and request.path != '/admin/') or request.path.startswith('/api/')


def register_error_handlers(app):
    """Register custom error handlers"""

    @app.errorhandler(404)
    def page_not_found(e):
        if _wants_json():
            return jsonify({'error': 'not found'}), 404
        return render_template('error.html', code=404, message='Page not found'), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({'error': 'method not allowed'}), 405

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        if _wants_json():
            return jsonify({'error': 'server error'}), 500
        return render_template('error.html', code=500, message='Something went wrong'), 500


def register_hooks(app):
    """Register request/response hooks"""

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['X-Content-Type-Options'] = 'nosniff'
        return response


# Create app instance for gunicorn
app = create_app()

if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=5000,
        debug=(env == 'development')
    )
