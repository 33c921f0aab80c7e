from molegame import db
from molegame.models import Preference

HIGH_SCORE_KEY = 'high_score'


class HighScoreStore:
    """Persists the best score as a single ``Preference`` row.

    Must be used inside an application context.
    """

    def __init__(self, namespace: str = 'wack_a_mole_prefs'):
        self.namespace = namespace

    def _record(self):
        return Preference.query.filter_by(namespace=self.namespace, key=HIGH_SCORE_KEY).first()

    def load(self) -> int:
        record = self._record()
        return int(record.value) if record else 0

    def save(self, value: int) -> None:
        record = self._record()
        if record is None:
            record = Preference(namespace=self.namespace, key=HIGH_SCORE_KEY)
        record.value = int(value)
        db.session.add(record)
        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

    def reset(self) -> None:
        self.save(0)
