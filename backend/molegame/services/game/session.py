import logging
import random
import threading
from typing import Callable, List, Optional

from .settings import GameSettings
from .state import NO_TARGET, RoundState
from .highscore import HighScoreStore


StateListener = Callable[[dict], None]


class GameSession:
    """Round lifecycle, hit handling and the high score ledger for one board.

    The clock and the mole mover drive ``clock_tick`` and ``move_mole``;
    players drive ``tap`` and ``start_round``. Every mutation goes through
    one lock and is followed by a notification to the subscribed listeners
    with the serialized state.
    """

    def __init__(self, settings: GameSettings, store: HighScoreStore,
                 rng: Optional[random.Random] = None, logger: Optional[logging.Logger] = None):
        self.settings = settings
        self.store = store
        self.rng = rng or random.Random()
        self.logger = logger or logging.getLogger(__name__)
        self.state = RoundState(settings.round_length)
        self._listeners: List[StateListener] = []
        self._lock = threading.RLock()

    # ---- observers ----

    def subscribe(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: StateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, payload: dict) -> None:
        for listener in list(self._listeners):
            listener(payload)

    # ---- read side ----

    @property
    def high_score(self) -> int:
        # Always read from the store; other processes may reset it. Needs an app context
        return self.store.load()

    def to_dict(self) -> dict:
        with self._lock:
            payload = self.state.to_dict()
            payload['high_score'] = self.high_score
            payload['grid_size'] = self.settings.grid_size
            payload['round_length'] = self.settings.round_length
            return payload

    def is_current(self, round_id: int) -> bool:
        with self._lock:
            return self.state.round_active and self.state.round_id == round_id

    def has_finished(self, round_id: int) -> bool:
        """True if ``round_id`` is the latest round and it ran out its clock."""
        with self._lock:
            return self.state.round_just_ended and self.state.round_id == round_id

    # ---- lifecycle ----

    def _random_cell(self) -> int:
        return self.rng.randrange(self.settings.grid_size)

    def start_round(self) -> int:
        """Reset the board and start a new round. Returns the new round id."""
        with self._lock:
            st = self.state
            st.score = 0
            st.remaining_seconds = self.settings.round_length
            # Mole is visible straight away, not after the first relocation
            st.active_cell = self._random_cell()
            st.credited = False
            st.round_just_ended = False
            st.round_active = True
            st.round_id += 1
            round_id = st.round_id
            self.logger.info(
                f"[round-start] round={round_id} length={st.remaining_seconds}s cell={st.active_cell}"
            )
            payload = self.to_dict()
        self._notify(payload)
        return round_id

    def end_round(self) -> bool:
        """Stop the round and record the score. True if the high score improved."""
        with self._lock:
            st = self.state
            st.round_active = False
            st.round_just_ended = True
            st.remaining_seconds = 0
            st.active_cell = NO_TARGET
            best = self.store.load()
            improved = st.score > best
            if improved:
                self.store.save(st.score)
                best = st.score
                self.logger.info(f"[high-score] round={st.round_id} new={st.score}")
            self.logger.info(f"[round-end] round={st.round_id} score={st.score} high_score={best}")
            payload = self.to_dict()
        self._notify(payload)
        return improved

    def reset_high_score(self) -> None:
        with self._lock:
            self.store.reset()
            self.logger.info("[high-score-reset] high score forced to 0")
            payload = self.to_dict()
        self._notify(payload)

    # ---- timed loops ----

    def clock_tick(self, round_id: Optional[int] = None) -> bool:
        """Advance the countdown by one tick.

        Returns True while the round should keep ticking. A stale
        ``round_id`` or an inactive round is a no-op returning False.
        """
        with self._lock:
            st = self.state
            if not st.round_active or (round_id is not None and round_id != st.round_id):
                return False
            st.remaining_seconds = max(0, st.remaining_seconds - 1)
            self.logger.debug(f"[clock-tick] round={st.round_id} remaining={st.remaining_seconds}s")
            if st.remaining_seconds == 0:
                self.end_round()
                return False
            payload = self.to_dict()
        self._notify(payload)
        return True

    def move_mole(self, round_id: Optional[int] = None) -> bool:
        """Relocate the mole to a random cell (repeats allowed) and clear the credit."""
        with self._lock:
            st = self.state
            if not st.round_active or (round_id is not None and round_id != st.round_id):
                return False
            st.active_cell = self._random_cell()
            st.credited = False
            self.logger.debug(f"[mole-move] round={st.round_id} cell={st.active_cell}")
            payload = self.to_dict()
        self._notify(payload)
        return True

    # ---- player input ----

    def tap(self, index: int) -> bool:
        """Try to hit ``index``. Scores at most once per mole appearance."""
        with self._lock:
            st = self.state
            if not st.round_active or st.credited or index != st.active_cell:
                return False
            st.score += 1
            st.credited = True
            payload = self.to_dict()
        self._notify(payload)
        return True
