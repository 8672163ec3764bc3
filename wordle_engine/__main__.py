"""
Wordle Engine Server - Main Entry Point

Run with ``python -m wordle_engine`` or the ``wordle-engine`` script.
It initializes the game service and starts the Flask-SocketIO application.
"""

import os
from . import create_app
from .config import config
from .services.game_service import initialize_game_service
from .utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    config_class = config[os.getenv('APP_ENV', 'default')]

    try:
        game_service = initialize_game_service(config_class=config_class)
        game_logger.logger.info(
            f"Game service initialized (max_guesses={game_service.max_guesses}, "
            f"allow_guesses_after_solve={game_service.allow_guesses_after_solve})"
        )

        app, socketio = create_app(config_class)

        game_logger.logger.info(f"Wordle engine server starting on {config_class.HOST}:{config_class.PORT}")
        print(f"Starting Wordle engine server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")

        socketio.run(app, host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle engine server shutting down (KeyboardInterrupt)")
    except Exception as e:
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
