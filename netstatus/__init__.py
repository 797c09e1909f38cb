from flask import Flask
from flask_socketio import SocketIO

from netstatus.scanner import NetworkScanner

socketio = SocketIO()

def create_app(config_object='config.Config'):
    app = Flask(
        __name__,
        template_folder='../templates'
    )
    app.config.from_object(config_object)

    # Initialize SocketIO for scan progress notifications
    socketio.init_app(
        app,
        async_mode=app.config.get("SOCKETIO_ASYNC_MODE"),
        cors_allowed_origins="*"
    )

    app.extensions['network_scanner'] = NetworkScanner.from_config(app.config)

    # Register blueprints
    from netstatus.routes import main, handle_connect
    app.register_blueprint(main)
    socketio.on_event('connect', handle_connect)

    return app
