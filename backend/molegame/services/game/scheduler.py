from typing import Set, Tuple

from molegame import socketio
from .session import GameSession


_scheduled_loops: Set[Tuple[int, str]] = set()


def schedule_round_timers(app, session: GameSession, round_id: int) -> None:
    """Start the clock and mole mover loops for ``round_id``.

    - No-ops in TESTING mode unless ENABLE_SCHEDULER_IN_TESTS is set
    - Ensures a single loop of each kind per round
    - Each loop sleeps, then re-checks that its round is still the live one;
      a restarted or finished round stops it at the next tick
    """
    if app.config.get('TESTING') and not app.config.get('ENABLE_SCHEDULER_IN_TESTS'):
        return

    settings = session.settings
    loops = (
        ('clock', settings.clock_tick_sec, session.clock_tick),
        ('mole', settings.mole_interval_sec, session.move_mole),
    )

    def _log_stop(kind: str, expected_round: int):
        if session.has_finished(expected_round):
            app.logger.info(f"[timer-done] loop={kind} round={expected_round} round finished")
        else:
            app.logger.info(f"[timer-abort] loop={kind} round={expected_round} superseded by round={session.state.round_id}")

    def _worker(kind: str, delay: float, step, expected_round: int):
        try:
            while True:
                socketio.sleep(delay)
                with app.app_context():
                    if not session.is_current(expected_round) or not step(expected_round):
                        _log_stop(kind, expected_round)
                        return
        finally:
            _scheduled_loops.discard((expected_round, kind))

    for kind, delay, step in loops:
        key = (round_id, kind)
        if key in _scheduled_loops:
            app.logger.info(f"[timer-skip] loop={kind} round={round_id} already scheduled")
            continue
        _scheduled_loops.add(key)
        app.logger.info(f"[timer-set] loop={kind} round={round_id} interval={delay}s")
        if app.config.get('TESTING'):
            # Inline: the clock runs the round out before the mover starts
            _worker(kind, delay, step, round_id)
        else:
            socketio.start_background_task(_worker, kind, delay, step, round_id)
