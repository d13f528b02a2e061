# frontend/app.py

import logging
from flask import Flask, jsonify

from backend.config import DEFAULT_CONFIG_PATH, GameConfig, load_config
from backend.game import GameSession
from frontend.api import SESSION_KEY, api_blueprint

logger = logging.getLogger(__name__)


def create_app(config: GameConfig = None) -> Flask:
    config = config if config is not None else load_config()

    app = Flask(__name__)
    app.config["GAME_CONFIG"] = config
    app.extensions[SESSION_KEY] = GameSession.from_config(config)
    app.register_blueprint(api_blueprint, url_prefix="/api")

    @app.route("/")
    def index():
        return jsonify({
            "name": "minesweeper",
            "tick_interval_seconds": config.tick_interval_seconds,
            "api": "/api",
        })

    return app


def main():
    import argparse

    parser = argparse.ArgumentParser()
    parser.add_argument("--port", type=int, default=5000, help="Port to run the server on")
    parser.add_argument("--host", type=str, default="0.0.0.0", help="Host IP")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="path to game config yaml")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    app = create_app(load_config(args.config))
    logger.info("Running on http://%s:%d/", args.host, args.port)
    app.run(debug=args.debug, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
