from flask import Blueprint, render_template

from playground.snippets import DEFAULT_CODE, EXAMPLE_SNIPPETS

main = Blueprint('main', __name__)


@main.route('/')
def index():
    return render_template('index.html',
                           default_code=DEFAULT_CODE,
                           examples=EXAMPLE_SNIPPETS)
