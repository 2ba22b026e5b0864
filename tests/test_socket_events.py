from playground import create_app, socketio
from playground.config import TestingConfig
from playground.services.compiler import CODE_REQUIRED, SERVICE_UNAVAILABLE


def received(sc, name):
    return [event['args'][0] for event in sc.get_received() if event['name'] == name]


def test_compile_event_emits_result(socket_client, compile_client):
    compile_client.payload = {'status': '0', 'program_output': 'Hello, World!\n'}

    socket_client.emit('compile', {'code': 'int main() {}'})

    results = received(socket_client, 'compile_result')
    assert len(results) == 1
    assert results[0]['output'] == 'Hello, World!\n'
    assert results[0]['error'] == ''
    assert results[0]['executionTime'] >= 0


def test_compile_event_rejects_missing_code(socket_client, compile_client):
    socket_client.emit('compile', {'code': ''})

    assert received(socket_client, 'compile_error') == [{'error': CODE_REQUIRED, 'status': 400}]
    assert compile_client.calls == []


def test_compile_event_reports_unavailable_service(unavailable_client):
    app = create_app(TestingConfig, compile_client=unavailable_client)
    sc = socketio.test_client(app)

    sc.emit('compile', {'code': 'int main() {}'})

    assert received(sc, 'compile_error') == [{'error': SERVICE_UNAVAILABLE, 'status': 503}]
    sc.disconnect()


def test_compile_event_without_payload_is_rejected(socket_client, compile_client):
    socket_client.emit('compile')

    assert received(socket_client, 'compile_error') == [{'error': CODE_REQUIRED, 'status': 400}]
    assert compile_client.calls == []
