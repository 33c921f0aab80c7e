import os


def _optional_int(name):
    raw = os.environ.get(name)
    return int(raw) if raw not in (None, '') else None


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///wackamole.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Round timing
    ROUND_LENGTH_SEC = int(os.environ.get('ROUND_LENGTH_SEC', '30'))
    CLOCK_TICK_SEC = float(os.environ.get('CLOCK_TICK_SEC', '1'))
    # Mole relocation interval (ms), accepted range 700-1000
    MOLE_INTERVAL_MS = int(os.environ.get('MOLE_INTERVAL_MS', '800'))
    # 3x3 board
    GRID_SIZE = int(os.environ.get('GRID_SIZE', '9'))
    # Optional: seed for reproducible mole placement
    RANDOM_SEED = _optional_int('RANDOM_SEED')
    # Namespace of the persisted high score record
    HIGH_SCORE_NAMESPACE = os.environ.get('HIGH_SCORE_NAMESPACE', 'wack_a_mole_prefs')
