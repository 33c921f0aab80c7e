MIN_MOLE_INTERVAL_MS = 700
MAX_MOLE_INTERVAL_MS = 1000


class GameSettings:
    """Timing and board size for a round."""

    def __init__(self, round_length=30, grid_size=9, mole_interval_ms=800, clock_tick_sec=1.0):
        if int(round_length) <= 0:
            raise ValueError(f'round_length must be positive, got {round_length}')
        if int(grid_size) <= 0:
            raise ValueError(f'grid_size must be positive, got {grid_size}')
        if not MIN_MOLE_INTERVAL_MS <= int(mole_interval_ms) <= MAX_MOLE_INTERVAL_MS:
            raise ValueError(
                f'mole_interval_ms must be within {MIN_MOLE_INTERVAL_MS}-{MAX_MOLE_INTERVAL_MS}, got {mole_interval_ms}'
            )
        if float(clock_tick_sec) < 0:
            raise ValueError(f'clock_tick_sec must not be negative, got {clock_tick_sec}')
        self.round_length = int(round_length)
        self.grid_size = int(grid_size)
        self.mole_interval_ms = int(mole_interval_ms)
        self.clock_tick_sec = float(clock_tick_sec)

    @property
    def mole_interval_sec(self) -> float:
        return self.mole_interval_ms / 1000.0

    def to_dict(self):
        return {
            'round_length': self.round_length,
            'grid_size': self.grid_size,
            'mole_interval_ms': self.mole_interval_ms,
        }


def load_settings(config) -> GameSettings:
    """Build settings from a Flask config mapping."""
    return GameSettings(
        round_length=config.get('ROUND_LENGTH_SEC', 30),
        grid_size=config.get('GRID_SIZE', 9),
        mole_interval_ms=config.get('MOLE_INTERVAL_MS', 800),
        clock_tick_sec=config.get('CLOCK_TICK_SEC', 1.0),
    )
