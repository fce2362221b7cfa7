import logging

from flask import Flask

from taskapi.api.routes import api
from taskapi.audit import AuditLog
from taskapi.config import Config
from taskapi.errors import TaskRequest
from taskapi.logging_setup import setup_logging
from taskapi.main.routes import main
from taskapi.models import db
from taskapi.store import TaskStore

logger = logging.getLogger(__name__)


def create_app(overrides=None):
    app = Flask(__name__)
    app.request_class = TaskRequest
    app.json.sort_keys = False

    app.config.from_object(Config())
    if overrides:
        app.config.update(overrides)

    setup_logging(app.config['LOG_LEVEL'])
    app.extensions['audit_log'] = AuditLog(app.config['AUDIT_LOG_PATH'])

    app.register_blueprint(api)
    app.register_blueprint(main)

    db.init_app(app)

    with app.app_context():
        db.create_all()
        if app.config['SEED_EXAMPLE_TASKS']:
            TaskStore().seed()
    return app


def main_cli():
    app = create_app()
    port = app.config['PORT']
    logger.info('API REST de tareas ejecutándose en http://localhost:%s', port)
    try:
        app.run(port=port, debug=app.config['DEVELOPMENT'], threaded=False)
    except KeyboardInterrupt:
        pass
    logger.info('Cerrando servidor...')


if __name__ == '__main__':
    main_cli()
