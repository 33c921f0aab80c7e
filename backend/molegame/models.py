from molegame import db


class Preference(db.Model):
    """A single integer setting stored under ``namespace``/``key``."""
    __tablename__ = 'preference'
    __table_args__ = (
        db.UniqueConstraint('namespace', 'key', name='uq_preference_namespace_key'),
    )
    id = db.Column(db.Integer, primary_key=True)
    namespace = db.Column(db.String(64), nullable=False, index=True)
    key = db.Column(db.String(64), nullable=False)
    value = db.Column(db.Integer, nullable=False, default=0)
