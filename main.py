"""
Daily Wordle Server - Main Entry Point

This is the main entry point for the daily puzzle server.
It validates the word list, connects the store, initializes the services
and starts the Flask application.
"""

import sys
from daily_wordle import create_app
from daily_wordle.config import Config, load_word_source
from daily_wordle.models.errors import EmptyWordListError, StorageError
from daily_wordle.services.puzzle_service import initialize_puzzle_engine
from daily_wordle.services.stats_service import initialize_stats_service
from daily_wordle.services.store import GameStore
from daily_wordle.services.word_service import WordList
from daily_wordle.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    print("Initializing services...")

    # Word list first: without it no puzzle can be served
    try:
        word_list = WordList.load(load_word_source(Config.WORD_LIST_PATH))
        print(f"✓ Word list loaded ({len(word_list)} words)")
    except (EmptyWordListError, FileNotFoundError, ValueError) as e:
        print(f"✗ Word list unusable: {e}")
        game_logger.logger.critical(f"Refusing to start, word list unusable: {e}")
        sys.exit(1)

    if not Config.MONGO_URI:
        print("✗ MongoDB URI not configured")
        sys.exit(1)
    if not Config.JWT_SECRET:
        print("✗ JWT Secret not configured")
        sys.exit(1)

    try:
        store = GameStore.connect(Config.MONGO_URI, Config.MONGO_DB_NAME)
        print("✓ Connected to MongoDB")
    except StorageError as e:
        print(f"✗ {e}")
        sys.exit(1)

    initialize_puzzle_engine(store, word_list)
    print("✓ Puzzle service initialized successfully")

    initialize_stats_service(store)
    print("✓ Statistics service initialized successfully")

    app = create_app(Config)
    print("✓ Flask application created successfully")

    game_logger.logger.info("Daily Wordle Server starting")

    print(f"\nStarting Daily Wordle Server on {Config.HOST}:{Config.PORT}")
    print(f"Debug mode: {Config.DEBUG}")
    print("=" * 50)

    try:
        app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)
    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Daily Wordle Server shutting down (KeyboardInterrupt)")
    finally:
        store.close_connection()


if __name__ == '__main__':
    main()
