"""
Word Scramble Game Server - Main Entry Point

This is the main entry point for the Word Scramble game server.
It loads the word resources, initializes the game service and starts the
Flask-SocketIO application.
"""

from wordscramble import create_app
from wordscramble.config import Config
from wordscramble.services.game_service import initialize_game_service
from wordscramble.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        # Loads the word pool and dictionary, fails fast if either is missing
        game_service = initialize_game_service(Config)
        print(f"✓ Game service initialized with {len(game_service.word_pool)} root words")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Word Scramble Server Starting")

        print(f"\nStarting Word Scramble Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print(f"Dictionary locale: {Config.DICTIONARY_LOCALE}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Word Scramble Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
