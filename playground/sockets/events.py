from flask import current_app, request
from flask_socketio import emit


def register_socket_events(socketio):

    @socketio.on('connect')
    def on_connect():
        current_app.logger.info(f"Client connected: {request.sid}")

    @socketio.on('disconnect')
    def on_disconnect(reason=None):
        current_app.logger.info(f"Client disconnected: {request.sid}")

    @socketio.on('compile')
    def on_compile(data=None):
        body, status = current_app.extensions['compile_service'].handle(data)
        # Results only go back to the client that asked
        if status == 200:
            emit('compile_result', body, room=request.sid)
        else:
            emit('compile_error', {'error': body['error'], 'status': status}, room=request.sid)
