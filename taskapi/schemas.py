"""Request body schemas for tasks.

``validate`` runs a schema over a decoded JSON body and returns either the
normalized body or every violation found, as user-facing messages.
"""
from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic_core import PydanticCustomError

UPDATABLE_FIELDS = ("titulo", "descripcion", "completada")

INVALID_INPUT = "Datos de entrada inválidos"
NO_FIELDS_MESSAGE = (
    "Debe proporcionar al menos un campo para actualizar: "
    "titulo, descripcion o completada."
)

_MESSAGES = {
    ("titulo", "missing"): "El título es obligatorio",
    ("titulo", "string_type"): "El título debe ser texto",
    ("titulo", "string_too_short"): "El título debe tener al menos 3 caracteres",
    ("descripcion", "string_type"): "La descripción debe ser texto",
    ("completada", "bool_type"): "El estado completada debe ser un booleano",
    ("completada", "bool_parsing"): "El estado completada debe ser un booleano",
    ("titulo", "null_value"): "El título debe ser texto",
    ("descripcion", "null_value"): "La descripción debe ser texto",
    ("completada", "null_value"): "El estado completada debe ser un booleano",
    ((), "model_type"): "El cuerpo de la petición debe ser un objeto JSON",
    ((), "model_attributes_type"): "El cuerpo de la petición debe ser un objeto JSON",
}


class TaskSchema(BaseModel):
    """Body of POST /tareas and PUT /tareas/<id>."""

    model_config = ConfigDict(extra="allow")
    partial: ClassVar[bool] = False

    title: str = Field(alias="titulo", min_length=3)
    description: str = Field("", alias="descripcion")
    completed: bool = Field(False, alias="completada")


class TaskPatchSchema(BaseModel):
    """Body of PATCH /tareas/<id>: any subset of the task fields, but not none."""

    model_config = ConfigDict(extra="allow")
    partial: ClassVar[bool] = True

    title: Optional[str] = Field(None, alias="titulo", min_length=3)
    description: Optional[str] = Field(None, alias="descripcion")
    completed: Optional[bool] = Field(None, alias="completada")

    @model_validator(mode="before")
    @classmethod
    def require_one_field(cls, data):
        if isinstance(data, dict) and not any(key in data for key in UPDATABLE_FIELDS):
            raise PydanticCustomError("no_fields", NO_FIELDS_MESSAGE)
        return data

    @field_validator("title", "description", "completed")
    @classmethod
    def reject_null(cls, value):
        # None only ever comes from an explicit null; omitted fields skip validation
        if value is None:
            raise PydanticCustomError("null_value", "Value must not be null")
        return value


def _message(error):
    loc = error["loc"][:1]
    key = (loc[0] if loc else (), error["type"])
    if key == ("titulo", "string_too_short") and error.get("input") == "":
        return "El título no debe estar vacío"
    return _MESSAGES.get(key, error["msg"])


def validate(schema, candidate):
    """Return ``(data, None)`` on success or ``(None, messages)`` on failure.

    All violations are reported at once. Unknown keys are kept in ``data``.
    Partial schemas only return the keys the caller actually sent.
    """
    try:
        value = schema.model_validate(candidate)
    except ValidationError as exc:
        return None, [_message(error) for error in exc.errors()]
    return value.model_dump(by_alias=True, exclude_unset=schema.partial), None


def supplied_fields(data):
    return [field for field in UPDATABLE_FIELDS if field in data]
