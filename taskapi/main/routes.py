import logging

from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound

from taskapi.api.routes import audit, original_url
from taskapi.errors import MalformedJSON

main = Blueprint('main', __name__)
logger = logging.getLogger(__name__)

API_VERSION = '1.0.0'

SUGGESTIONS = [
    'GET / - Información de la API',
    'GET /tareas - Listar tareas',
    'POST /tareas - Crear tarea',
]


@main.route('/')
def index():
    return jsonify({
        'mensaje': 'API de Gestión de Tareas',
        'version': API_VERSION,
        'endpoints': {
            'GET /': 'Esta información',
            'GET /tareas': 'Listar tareas',
            'GET /tareas/:id': 'Obtener tarea específica',
            'POST /tareas': 'Crear nueva tarea',
            'PUT /tareas/:id': 'Actualizar tarea completa',
            'PATCH /tareas/:id': 'Actualizar tarea parcial',
            'DELETE /tareas/:id': 'Eliminar tarea',
            'GET /estadisticas': 'Conteo de tareas por estado',
        },
        'ejemplos': {
            'crear': 'POST /tareas con body: {"titulo": "Mi tarea", "descripcion": "Descripción"}',
            'filtrar': 'GET /tareas?completada=false',
            'buscar': 'GET /tareas?q=express',
            'estadisticas': 'GET /estadisticas',
        },
    })


@main.app_errorhandler(MalformedJSON)
def malformed_json(error):
    return jsonify({'error': 'JSON inválido'}), 400


# unknown methods on known paths are treated like unknown routes
@main.app_errorhandler(NotFound)
@main.app_errorhandler(MethodNotAllowed)
def route_not_found(error):
    return jsonify({
        'error': 'Ruta no encontrada',
        'metodo': request.method,
        'ruta': original_url(),
        'sugerencias': SUGGESTIONS,
    }), 404


@main.app_errorhandler(Exception)
def internal_error(error):
    if isinstance(error, HTTPException):
        return error

    logger.exception('Error: %s', error)
    audit(500, f'Error Interno: {error}')

    if current_app.config['DEVELOPMENT']:
        detail = str(error)
    else:
        detail = 'Algo salió mal'
    return jsonify({'error': 'Error interno del servidor', 'mensaje': detail}), 500
