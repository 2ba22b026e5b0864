from flask import Blueprint, current_app, jsonify, request

from playground.services.compiler import UNEXPECTED_ERROR
from playground.snippets import EXAMPLE_SNIPPETS

api = Blueprint('api', __name__)


@api.route('/compile', methods=['POST'])
def compile_code():
    try:
        data = request.get_json(force=True)
    except Exception:
        current_app.logger.exception("Could not decode compile request body")
        return jsonify({'error': UNEXPECTED_ERROR}), 500

    body, status = current_app.extensions['compile_service'].handle(data)
    return jsonify(body), status


@api.route('/examples')
def examples():
    return jsonify({'examples': EXAMPLE_SNIPPETS})
