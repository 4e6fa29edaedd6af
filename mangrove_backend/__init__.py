import os
from flask import Flask
from flask_restful import Api
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from .config.settings import Config, database_uri
from .utils.logger import setup_logger
from .utils.exceptions import APIError, handle_api_error

db = SQLAlchemy()

def create_app(config_overrides=None, model_repository=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    app.config['MAX_CONTENT_LENGTH'] = Config.MAX_UPLOAD_SIZE
    if config_overrides:
        app.config.update(config_overrides)

    uri = database_uri(app.config['SQLALCHEMY_DATABASE_URI'])
    app.config['SQLALCHEMY_DATABASE_URI'] = uri
    db_path = uri[len('sqlite:///'):] if uri.startswith('sqlite:///') else ''
    if os.path.isabs(db_path):
        # SQLite creates the file but not its directory
        os.makedirs(os.path.dirname(db_path), exist_ok=True)

    # Initialize CORS for the public API only
    CORS(app, resources={r"/api/*": {"origins": app.config['CORS_ORIGINS']}})

    # Initialize extensions
    db.init_app(app)
    api = Api(app)

    # Setup logger
    logger = setup_logger()
    logger.info("Initializing backend application")

    # Register error handler
    app.register_error_handler(APIError, handle_api_error)

    # One model cache per application, shared by every request
    from .repositories.model_repository import ModelRepository
    if model_repository is None:
        model_repository = ModelRepository(app.config['MODEL_URL'], app.config['IMAGE_SIZE'])
    app.extensions['model_repository'] = model_repository

    # Register API resources
    from .api.resources.predict import Predict
    from .api.resources.configs import Configs
    from .api.docs import init_docs
    from .admin.views import admin

    api.add_resource(Predict, '/api/v1/predict', resource_class_kwargs={'model_repository': model_repository})
    api.add_resource(Configs, '/api/v1/configs')
    app.register_blueprint(admin)
    init_docs(app)

    # Initialize database
    from .core import database  # noqa: F401  registers the models
    from .core.seed import seed_defaults
    with app.app_context():
        db.create_all()
        if app.config['SEED_DEFAULTS']:
            seed_defaults()

    return app
