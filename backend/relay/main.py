import os

from flask import Blueprint, abort, current_app, jsonify, send_from_directory

from relay.runtime import get_runtime
from relay.services.rooms.presence import room_listing, status_report

main = Blueprint('main', __name__)


@main.route('/status')
def status():
    runtime = get_runtime()
    return jsonify(status_report(runtime.store, runtime.connections, runtime.started_at, runtime.clock()))


@main.route('/rooms')
def list_rooms():
    runtime = get_runtime()
    return jsonify(room_listing(runtime.store, runtime.clock()))


@main.route('/', defaults={'path': ''})
@main.route('/<path:path>')
def client_app(path):
    """Serve the built game client, falling back to index.html for client-side routes."""
    static_folder = current_app.config.get('STATIC_FOLDER')
    if not static_folder:
        if path:
            abort(404)
        return jsonify({'message': 'Room relay server is running'})
    if path.startswith('socket.io'):
        abort(404)
    # send_from_directory resolves relative folders against the app root, not the cwd
    static_folder = os.path.abspath(static_folder)
    if path and os.path.isfile(os.path.join(static_folder, path)):
        return send_from_directory(static_folder, path)
    return send_from_directory(static_folder, 'index.html')
