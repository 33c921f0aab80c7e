from flask import Blueprint, jsonify, current_app


settings_bp = Blueprint('settings', __name__)


@settings_bp.route('', methods=['GET'])
def open_settings():
    session = current_app.extensions['molegame']
    payload = session.settings.to_dict()
    payload['high_score'] = session.high_score
    return jsonify(payload)


@settings_bp.route('/high-score/reset', methods=['POST'])
def reset_high_score():
    session = current_app.extensions['molegame']
    session.reset_high_score()
    return jsonify({'high_score': session.high_score})
