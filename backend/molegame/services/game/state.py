NO_TARGET = -1


class RoundState:
    """Mutable state of the board for the current (or last) round.

    ``active_cell`` is ``NO_TARGET`` whenever no round is running.
    ``round_id`` increases on every start so timers can tell whether
    the round they were scheduled for is still the live one.
    """

    def __init__(self, round_length: int):
        self.score = 0
        self.remaining_seconds = round_length
        self.active_cell = NO_TARGET
        self.round_active = False
        self.round_just_ended = False
        self.credited = False
        self.round_id = 0

    @property
    def mole_visible(self) -> bool:
        return self.round_active and self.active_cell != NO_TARGET and not self.credited

    @property
    def phase(self) -> str:
        if self.round_active:
            return 'running'
        if self.round_just_ended:
            return 'over'
        return 'idle'

    def to_dict(self):
        return {
            'score': self.score,
            'remaining_seconds': self.remaining_seconds,
            'active_cell': self.active_cell,
            'round_active': self.round_active,
            'round_just_ended': self.round_just_ended,
            'credited': self.credited,
            'mole_visible': self.mole_visible,
            'phase': self.phase,
            'round_id': self.round_id,
        }
