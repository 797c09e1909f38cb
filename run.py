import eventlet
eventlet.monkey_patch()

from netstatus import create_app, socketio
app = create_app()

ENDPOINTS = [
    ('GET ', '/api/network/status', 'Get quick network overview'),
    ('GET ', '/api/network/scan  ', 'Scan network for devices'),
    ('POST', '/api/device/ping   ', 'Ping specific device (JSON: {"ip": "192.168.1.1"})'),
]

if __name__ == '__main__':
    host = app.config['HOST']
    port = app.config['PORT']
    print(f"Starting Network Status API on {host}:{port}")
    print("Endpoints:")
    for method, path, description in ENDPOINTS:
        print(f"  {method} {path} - {description}")

    # Run the application
    socketio.run(app, host=host, port=port, debug=app.config['DEBUG'])
