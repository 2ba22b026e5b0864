from flask import Flask

from playground.config import Config
from playground.extensions import socketio
from playground.services.compiler import CompileService


def create_app(config_class=Config, compile_client=None):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(str(app.config.get('LOG_LEVEL', 'INFO')).upper())

    # Extensions
    socketio.init_app(app, cors_allowed_origins="*", async_mode='threading')
    CompileService(client=compile_client).init_app(app)

    # Blueprints
    from playground.routes.main import main
    from playground.routes.api import api
    app.register_blueprint(main)
    app.register_blueprint(api, url_prefix='/api')

    # Socket.IO handlers
    from playground.sockets.events import register_socket_events
    register_socket_events(socketio)

    app.logger.info(f"Compile requests are proxied to {app.config['COMPILE_SERVICE_URL']}")
    return app
