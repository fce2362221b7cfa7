"""The task collection.

``TaskStore`` is the single owner of task state. Routes never touch the
session or the model objects' fields directly.
"""
import re
import unicodedata
from typing import Optional

from taskapi.models import Task, db, utcnow

EXAMPLE_TASKS = (
    {"titulo": "Aprender Express", "descripcion": "Completar tutorial", "completada": False},
    {"titulo": "Crear API", "descripcion": "Implementar endpoints REST", "completada": True},
    {"titulo": "Testing", "descripcion": "Probar con Postman", "completada": False},
)


ID_PATTERN = re.compile(r"[0-9]+")
MAX_ID = 2**63 - 1


def coerce_id(task_id) -> Optional[int]:
    # plain ASCII digits only, and nothing SQLite cannot store as INTEGER
    if isinstance(task_id, bool):
        return None
    if isinstance(task_id, int):
        value = task_id
    elif isinstance(task_id, str) and ID_PATTERN.fullmatch(task_id):
        value = int(task_id)
    else:
        return None
    return value if 0 <= value <= MAX_ID else None


def collation_key(text: str):
    # Case and accents only matter when the words are otherwise equal.
    stripped = "".join(
        ch for ch in unicodedata.normalize("NFKD", text) if not unicodedata.combining(ch)
    )
    return stripped.casefold(), text


class TaskStore:
    def __init__(self):
        self.session = db.session

    def get(self, task_id) -> Optional[Task]:
        task_id = coerce_id(task_id)
        if task_id is None:
            return None
        return self.session.get(Task, task_id)

    def list(self, completed=None, search=None, sort=None) -> list:
        query = Task.query.order_by(Task.id)
        if completed is not None:
            query = query.filter_by(completed=(completed == "true"))
        results = query.all()

        if search:
            term = search.lower()
            results = [
                t for t in results
                if term in t.title.lower() or term in t.description.lower()
            ]

        if sort == "titulo":
            results.sort(key=lambda t: collation_key(t.title))
        elif sort == "fecha":
            # no ordering timestamp beyond creation order, newest first
            results.reverse()
        return results

    def create(self, fields) -> Task:
        task = Task(
            title=fields["titulo"],
            description=fields.get("descripcion") or "",
            completed=bool(fields.get("completada", False)),
            created_at=utcnow(),
        )
        self.session.add(task)
        self.session.commit()
        return task

    def replace(self, task_id, fields) -> Optional[Task]:
        task = self.get(task_id)
        if task is None:
            return None
        task.title = fields["titulo"]
        task.description = fields.get("descripcion") or ""
        completed = fields.get("completada")
        task.completed = completed if completed is not None else False
        task.updated_at = utcnow()
        self.session.commit()
        return task

    def patch(self, task_id, fields) -> Optional[Task]:
        task = self.get(task_id)
        if task is None:
            return None
        if "titulo" in fields:
            task.title = fields["titulo"]
        if "descripcion" in fields:
            task.description = fields["descripcion"]
        if "completada" in fields:
            task.completed = fields["completada"]
        task.updated_at = utcnow()
        self.session.commit()
        return task

    def remove(self, task_id) -> Optional[dict]:
        """Delete a task and return what it looked like."""
        task = self.get(task_id)
        if task is None:
            return None
        snapshot = task.to_dict()
        self.session.delete(task)
        self.session.commit()
        return snapshot

    def count(self) -> int:
        return Task.query.count()

    def stats(self) -> dict:
        total = self.count()
        completed = Task.query.filter_by(completed=True).count()
        return {
            "total": total,
            "completadas": completed,
            "pendientes": total - completed,
            "porcentajeCompletadas": completed / total * 100 if total > 0 else 0,
        }

    def seed(self, tasks=EXAMPLE_TASKS):
        for fields in tasks:
            self.create(fields)
