"""
Flask application factory.
"""
import os
from flask import Flask
from tzfield.config import get_configured_timezone


def create_app(config_name='development'):
    """Create and configure the Flask application."""
    app = Flask(__name__, instance_relative_config=True)

    # Load configuration
    if config_name == 'production':
        app.config.from_object('flask_app.config.ProductionConfig')
    elif config_name == 'testing':
        app.config.from_object('flask_app.config.TestingConfig')
    else:
        app.config.from_object('flask_app.config.DevelopmentConfig')

    from flask_app.json_provider import TimeZoneJSONProvider
    app.json = TimeZoneJSONProvider(app)

    # Zone used for users without a stored preference
    app.config['DEFAULT_TIMEZONE'] = get_configured_timezone(app.config['TIMEZONE_ENV_VAR'])

    # Ensure instance folder exists
    try:
        os.makedirs(app.instance_path, exist_ok=True)
    except OSError:
        pass

    # Initialize extensions
    from flask_app.models import db
    db.init_app(app)

    # Register blueprints
    from flask_app.routes.settings import settings_bp

    app.register_blueprint(settings_bp, url_prefix='/settings')

    with app.app_context():
        db.create_all()

    return app
