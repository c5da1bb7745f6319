"""
Daily Wordle Server Application Package

One shared puzzle per calendar day, per-user game sessions, and streak
statistics, served over a small JSON API.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Services are initialized separately (see main.py) and looked up by the
    controllers through their global accessors.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance with all extensions initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)

    # Register blueprints
    from .controllers.puzzle_controller import puzzle_bp, health_bp
    from .controllers.profile_controller import profile_bp

    app.register_blueprint(puzzle_bp, url_prefix='/api/puzzle')
    app.register_blueprint(profile_bp, url_prefix='/api/auth')
    app.register_blueprint(health_bp)

    return app
