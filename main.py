"""
Word Quest Game Server - Main Entry Point

This is the main entry point for the Word Quest game server.
It initializes all services and starts the Flask-SocketIO application.
"""

import threading
import time
from wordquest import create_app
from wordquest.config import Config, validate_word_list_integrity
from wordquest.services.game_service import initialize_game_service, get_game_service
from wordquest.services.password_service import initialize_password_service, get_password_service
from wordquest.utils.game_logger import game_logger


def idle_cleanup_worker(app, max_idle_seconds, interval_seconds):
    """
    Background worker that periodically discards games and password vaults
    nobody has touched for ``max_idle_seconds``. A player who closes the tab
    never deletes their game, so this is what frees it.
    """
    print("Idle session cleanup worker started")
    while True:
        try:
            with app.app_context():
                game_service = get_game_service()
                password_service = get_password_service()
                if game_service:
                    expired = game_service.cleanup_idle_games(max_idle_seconds)
                    if expired:
                        game_logger.logger.info(f"Idle cleanup: Removed {len(expired)} expired game(s)")
                    for game_id in expired:
                        game_logger.log_game_event(
                            game_id, 'game_expired', 'system',
                            reason='idle_timeout', max_idle_seconds=max_idle_seconds
                        )
                if password_service:
                    expired_vaults = password_service.cleanup_idle_vaults(max_idle_seconds)
                    if expired_vaults:
                        game_logger.logger.info(f"Idle cleanup: Removed {len(expired_vaults)} expired vault(s)")
        except Exception as e:
            game_logger.logger.error(f"Error in idle cleanup worker: {e}")

        time.sleep(interval_seconds)


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        validate_word_list_integrity()

        game_service = initialize_game_service(Config)
        if game_service.word_source.fallback_used:
            print("! Word source unavailable, using fallback word list")
        print(f"✓ Game service initialized with {len(game_service.word_source.words)} words")

        initialize_password_service()
        print("✓ Password vault service initialized successfully")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        cleanup_thread = threading.Thread(
            target=idle_cleanup_worker,
            args=(app, Config.SESSION_IDLE_TIMEOUT_SECONDS, Config.CLEANUP_INTERVAL_SECONDS),
            daemon=True
        )
        cleanup_thread.start()
        print(f"✓ Idle cleanup worker started - checking every {Config.CLEANUP_INTERVAL_SECONDS} seconds")

        game_logger.logger.info("Word Quest Server Starting")

        print(f"\nStarting Word Quest Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print(f"Default game mode: {Config.DEFAULT_GAME_MODE}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Word Quest Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
