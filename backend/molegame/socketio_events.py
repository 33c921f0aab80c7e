from flask_socketio import join_room, leave_room, emit
from flask import current_app
from molegame import socketio
from molegame.api.game import parse_cell_index
from molegame.services.game.scheduler import schedule_round_timers

BOARD_ROOM = 'board'


def _session():
    return current_app.extensions['molegame']


def handle_connect():
    emit('connected', {'message': 'Connected to /ws', 'state': _session().to_dict()})


def handle_join_board(data=None):
    join_room(BOARD_ROOM)
    emit('joined', {'room': BOARD_ROOM})
    emit('state_update', _session().to_dict())


def handle_leave_board(data=None):
    leave_room(BOARD_ROOM)
    emit('left', {'room': BOARD_ROOM})


def handle_start(data=None):
    session = _session()
    round_id = session.start_round()
    schedule_round_timers(current_app._get_current_object(), session, round_id)


def handle_tap(data):
    session = _session()
    index, error = parse_cell_index(data, session.settings.grid_size)
    if error:
        emit('error', {'message': error})
        return
    emit('tap_result', {'index': index, 'hit': session.tap(index)})


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers(testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    """
    handlers = {
        'connect': handle_connect,
        'join_board': handle_join_board,
        'leave_board': handle_leave_board,
        'start': handle_start,
        'tap': handle_tap,
        'ping': handle_ping,
    }
    namespaces = ['/ws', '/'] if testing else ['/ws']
    for namespace in namespaces:
        for event, handler in handlers.items():
            socketio.on_event(event, handler, namespace=namespace)
