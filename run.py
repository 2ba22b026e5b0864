import os

from playground import create_app, socketio

app = create_app()

if __name__ == '__main__':
    # Development server for the editor page and /api/compile; set FLASK_RUN_HOST=0.0.0.0 to serve the LAN
    host = os.environ.get('FLASK_RUN_HOST', '127.0.0.1')
    port = int(os.environ.get('FLASK_RUN_PORT', 5000))
    debug = os.environ.get('FLASK_DEBUG', 'False').lower() == 'true'

    app.logger.info(f"Starting C++ playground on {host}:{port} with debug={debug}")
    socketio.run(app, debug=debug, host=host, port=port, allow_unsafe_werkzeug=True)
