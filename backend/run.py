import os

import click

from relay import create_app, socketio


@click.command()
@click.option('--host', default=None, help='Interface to bind (defaults to HOST).')
@click.option('--port', type=int, default=None, help='Port to listen on (defaults to PORT).')
@click.option('--debug', is_flag=True, help='Enable Flask debug mode.')
def main(host, port, debug):
    """Start the room relay server."""
    # With the reloader on, only the child process serves rooms
    reloader_parent = debug and os.environ.get('WERKZEUG_RUN_MAIN') != 'true'
    app = create_app(start_sweeper=not reloader_parent)
    if host is None:
        host = app.config['HOST']
    if port is None:
        port = app.config['PORT']
    app.logger.info(f"[startup] relay listening on {host}:{port}")
    # Use SocketIO server to enable websockets
    socketio.run(app, host=host, port=port, debug=debug, allow_unsafe_werkzeug=True)


if __name__ == '__main__':
    main()
