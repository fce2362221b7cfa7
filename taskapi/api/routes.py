import json

from flask import Blueprint, current_app, jsonify, request

from taskapi.schemas import INVALID_INPUT, TaskPatchSchema, TaskSchema, supplied_fields, validate
from taskapi.store import TaskStore

api = Blueprint('api', __name__)
store = TaskStore()

NOT_FOUND = {'error': 'Tarea no encontrada'}


def original_url():
    query = request.query_string.decode('utf-8', 'replace')
    return f'{request.path}?{query}' if query else request.path


def audit(status_code, message):
    current_app.extensions['audit_log'].log(request.method, original_url(), status_code, message)


def validated_body(schema):
    data, errors = validate(schema, request.json_body())
    if errors:
        return None, (jsonify({'error': INVALID_INPUT, 'detalles': errors}), 400)
    return data, None


def not_found(task_id, failure):
    audit(404, f'{failure} - Tarea ID {task_id} no encontrada')
    return jsonify(NOT_FOUND), 404


@api.route('/estadisticas', methods=['GET'])
def get_stats():
    return jsonify(store.stats())


@api.route('/tareas', methods=['GET'])
def list_tasks():
    filters = request.args.to_dict()
    tasks = store.list(
        completed=filters.get('completada'),
        search=filters.get('q'),
        sort=filters.get('ordenar'),
    )
    filters_json = json.dumps(filters, ensure_ascii=False, separators=(',', ':'))
    audit(200, f'Listando {len(tasks)} tareas (Filtros: {filters_json})')
    return jsonify({
        'total': len(tasks),
        'tareas': [task.to_dict() for task in tasks],
        'filtros': filters,
    })


@api.route('/tareas/<task_id>', methods=['GET'])
def get_task(task_id):
    task = store.get(task_id)
    if task is None:
        return not_found(task_id, 'Fallo en Lectura')

    audit(200, f'Lectura exitosa de Tarea ID {task.id} ({task.title})')
    return jsonify(task.to_dict())


@api.route('/tareas', methods=['POST'])
def add_task():
    data, error = validated_body(TaskSchema)
    if error:
        return error

    task = store.create(data)
    audit(201, f'Creación exitosa: Tarea ID {task.id} ({task.title})')
    return jsonify({'mensaje': 'Tarea creada exitosamente', 'tarea': task.to_dict()}), 201


@api.route('/tareas/<task_id>', methods=['PUT'])
def replace_task(task_id):
    data, error = validated_body(TaskSchema)
    if error:
        return error

    task = store.replace(task_id, data)
    if task is None:
        return not_found(task_id, 'Fallo en Actualización (PUT)')

    audit(200, f'Actualización (PUT) exitosa de Tarea ID {task.id} ({task.title})')
    return jsonify({'mensaje': 'Tarea actualizada completamente', 'tarea': task.to_dict()})


@api.route('/tareas/<task_id>', methods=['PATCH'])
def update_task(task_id):
    data, error = validated_body(TaskPatchSchema)
    if error:
        return error

    task = store.patch(task_id, data)
    if task is None:
        return not_found(task_id, 'Fallo en Actualización (PATCH)')

    fields = ', '.join(supplied_fields(data))
    audit(200, f'Actualización (PATCH) parcial de Tarea ID {task.id} - Campos: [{fields}]')
    return jsonify({'mensaje': 'Tarea actualizada parcialmente', 'tarea': task.to_dict()})


@api.route('/tareas/<task_id>', methods=['DELETE'])
def delete_task(task_id):
    task = store.remove(task_id)
    if task is None:
        return not_found(task_id, 'Fallo en Eliminación')

    audit(200, f'Eliminación exitosa: Tarea ID {task["id"]} ({task["titulo"]})')
    return jsonify({'mensaje': 'Tarea eliminada exitosamente', 'tarea': task})
