from flask import Blueprint, jsonify, request, current_app
from molegame.services.game import GameSession
from molegame.services.game.scheduler import schedule_round_timers


game = Blueprint('game', __name__)


def _session() -> GameSession:
    return current_app.extensions['molegame']


def parse_cell_index(data, grid_size: int):
    """Return (index, error) for a tap payload."""
    index = (data or {}).get('index')
    # bool is an int subclass; reject it explicitly
    if isinstance(index, bool) or not isinstance(index, int):
        return None, 'index must be an integer'
    if not 0 <= index < grid_size:
        return None, f'index must be within 0-{grid_size - 1}'
    return index, None


@game.route('/state', methods=['GET'])
def get_state():
    return jsonify(_session().to_dict())


@game.route('/start', methods=['POST'])
def start_round():
    session = _session()
    round_id = session.start_round()
    schedule_round_timers(current_app._get_current_object(), session, round_id)
    return jsonify(session.to_dict())


@game.route('/tap', methods=['POST'])
def tap_cell():
    session = _session()
    data = request.get_json(silent=True)
    index, error = parse_cell_index(data, session.settings.grid_size)
    if error:
        return jsonify({'error': error}), 400
    hit = session.tap(index)
    return jsonify({'hit': hit, 'state': session.to_dict()})
