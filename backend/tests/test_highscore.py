import pytest

from molegame import db
from molegame.models import Preference
from molegame.services.game import HighScoreStore, HIGH_SCORE_KEY, GameSettings, load_settings


def test_load_empty_store_returns_zero(flask_app):
    assert HighScoreStore().load() == 0


def test_save_then_load(flask_app):
    store = HighScoreStore()
    store.save(5)
    assert store.load() == 5
    # overwrite, single record
    store.save(3)
    assert store.load() == 3
    assert Preference.query.filter_by(key=HIGH_SCORE_KEY).count() == 1


def test_reset_forces_zero(flask_app):
    store = HighScoreStore()
    store.save(41)
    store.reset()
    assert store.load() == 0


def test_namespaces_are_isolated(flask_app):
    HighScoreStore('board_a').save(9)
    assert HighScoreStore('board_b').load() == 0
    assert HighScoreStore('board_a').load() == 9


def test_value_survives_a_new_store_instance(flask_app):
    HighScoreStore().save(17)
    db.session.remove()
    assert HighScoreStore().load() == 17


def test_settings_from_config(flask_app):
    settings = load_settings(flask_app.config)
    assert settings.round_length == 30
    assert settings.grid_size == 9
    assert settings.mole_interval_ms == 800
    assert settings.mole_interval_sec == pytest.approx(0.8)


@pytest.mark.parametrize('kwargs', [
    {'mole_interval_ms': 699},
    {'mole_interval_ms': 1001},
    {'round_length': 0},
    {'grid_size': 0},
    {'clock_tick_sec': -1},
])
def test_invalid_settings_rejected(kwargs):
    with pytest.raises(ValueError):
        GameSettings(**kwargs)
