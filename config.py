import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'
    HOST = '0.0.0.0'
    PORT = 8080
    DEBUG = os.environ.get('FLASK_DEBUG', '').lower() in ('1', 'true', 'yes')

    # Fixed scan window: host octets 1..SCAN_WINDOW of the local /24
    SCAN_WINDOW = 50
    MAX_PING_THREADS = 50
    PROBE_TIMEOUT = 0.5
    TCP_PROBE_PORT = 80
    UDP_PROBE_PORT = 53

    AUDIT_LOG_DIR = os.environ.get('AUDIT_LOG_DIR') or os.path.join(os.path.dirname(__file__), 'logs')
    AUDIT_LOG_MAX_LINES = 1000

    # None lets Flask-SocketIO pick eventlet when it is installed
    SOCKETIO_ASYNC_MODE = None
