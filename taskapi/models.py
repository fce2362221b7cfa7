from datetime import datetime, timezone

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


def utcnow():
    return datetime.now(timezone.utc)


def isoformat(value):
    # same shape as JavaScript's Date.toISOString()
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Task(db.Model):
    __tablename__ = "tasks"
    # ids are never handed out twice, even after the newest task is deleted
    __table_args__ = {"sqlite_autoincrement": True}

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False, default="")
    completed = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime)

    def to_dict(self):
        data = {
            "id": self.id,
            "titulo": self.title,
            "descripcion": self.description,
            "completada": self.completed,
            "fechaCreacion": isoformat(self.created_at),
        }
        if self.updated_at is not None:
            data["fechaActualizacion"] = isoformat(self.updated_at)
        return data

    def __repr__(self):
        return f"<Task {self.id} {self.title!r}>"
