from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import os
import random
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()
allowed_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:5174",
    "http://127.0.0.1:5174",
]
socketio = SocketIO(cors_allowed_origins=allowed_origins, async_mode=None)
MIGRATIONS_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'migrations')


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    db.init_app(flask_app)
    migrate.init_app(flask_app, db, directory=MIGRATIONS_DIR)
    CORS(flask_app, supports_credentials=True, origins=allowed_origins)

    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # Game board: fails fast on bad timing settings
    from molegame.services.game import GameSession, HighScoreStore, load_settings
    settings = load_settings(flask_app.config)
    store = HighScoreStore(namespace=flask_app.config.get('HIGH_SCORE_NAMESPACE', 'wack_a_mole_prefs'))
    session = GameSession(settings, store, rng=random.Random(flask_app.config.get('RANDOM_SEED')), logger=flask_app.logger)
    session.subscribe(_broadcast_state)
    flask_app.extensions['molegame'] = session

    from molegame.main import main
    flask_app.register_blueprint(main)

    from molegame.api.game import game
    flask_app.register_blueprint(game, url_prefix='/api/game')

    from molegame.api.settings import settings_bp
    flask_app.register_blueprint(settings_bp, url_prefix='/api/settings')

    from molegame.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the database."""
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            store.save(0)
            print('Database has been reset and seeded!')

    @click.command('reset-high-score')
    def reset_high_score_command():
        """Forces the persisted high score back to zero."""
        with flask_app.app_context():
            session.reset_high_score()
            print('High score has been reset.')

    flask_app.cli.add_command(db_reset_command)
    flask_app.cli.add_command(reset_high_score_command)

    return flask_app


def _broadcast_state(payload):
    socketio.emit('state_update', payload, to='board', namespace='/ws')
