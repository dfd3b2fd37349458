"""
Purpose: Flask server hosting the map-editing session.
Dependencies: flask, server/routes/map.py, core/session.py, core/log.py.
Ext Hooks: Add more routes.
"""

from flask import Flask
import structlog

from hexpath.core.config import DEBUG
from hexpath.core.log import configure_logging
from hexpath.core.session import MapSession
from hexpath.server.routes.map import bp

logger = structlog.get_logger()


def create_app(session=None):
    app = Flask(__name__)
    app.config["MAP_SESSION"] = session if session is not None else MapSession()
    app.register_blueprint(bp)
    return app


def main(debug=DEBUG):
    configure_logging()
    app = create_app()
    logger.info("Starting hexpath server", radius=app.config["MAP_SESSION"].radius, debug=debug)
    app.run(debug=debug)


if __name__ == "__main__":
    main()
