"""
Wordle Game Application Package

Contains the guess-scoring engine, the client-side reconciliation layer that
keeps play going when the remote authority is unreachable, and the Flask
application that acts as that authority.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance with the game blueprint registered
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)

    from .services.game_service import get_game_service, initialize_game_service
    if get_game_service() is None:
        initialize_game_service()

    # Register blueprints
    from .controllers.game_controller import game_bp

    app.register_blueprint(game_bp, url_prefix='/api')

    return app
