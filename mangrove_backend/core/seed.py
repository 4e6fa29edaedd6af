# mangrove_backend/core/seed.py
from flask import current_app
from ..repositories.config_repository import ConfigRepository
from ..repositories.mangrove_repository import MangroveRepository
from ..services.auth_service import AuthService
from ..utils.exceptions import AlreadyExistsError
from ..utils.logger import setup_logger

DEFAULT_CONFIGS = [
    {"key": "about", "value": "Foo", "input": "textarea"},
    {"key": "about_banner", "value": "https://sample", "input": "text"},
    {"key": "help", "value": "Bar", "input": "textarea"},
    {"key": "help_banner", "value": "https://sample", "input": "text"},
    {"key": "tfjs_model_uri", "value": "https://aziyan99.github.io/202310221831tfjs/model.json", "input": "text"},
]

DEFAULT_MANGROVES = [
    {"data_id": 0, "name": "Avicennia alba"},
    {"data_id": 1, "name": "Bruguiera cylindrica"},
    {"data_id": 2, "name": "Bruguiera gymnorrhiza"},
    {"data_id": 3, "name": "Lumnitzera littorea"},
    {"data_id": 4, "name": "Rhizophora apiculata"},
    {"data_id": 5, "name": "Rhizophora mucronata"},
    {"data_id": 6, "name": "Sonneratia alba"},
    {"data_id": 7, "name": "Xylocarpus granatum"},
]

def seed_defaults():
    """Insert the default admin, configs and mangroves that are not there yet.

    Safe to run on every start: rows that already exist are left untouched.
    """
    logger = setup_logger()
    created = 0

    auth_service = AuthService()
    username = current_app.config['ADMIN_USERNAME']
    # Looked up first only to skip the bcrypt hash; the unique index still decides
    if auth_service.user_repository.get_user_by_username(username) is None:
        try:
            auth_service.register(username, current_app.config['ADMIN_PASSWORD'])
            created += 1
        except AlreadyExistsError:
            pass

    config_repository = ConfigRepository()
    for config in DEFAULT_CONFIGS:
        try:
            config_repository.create_config(config["key"], config["value"], config["input"])
            created += 1
        except AlreadyExistsError:
            pass

    mangrove_repository = MangroveRepository()
    for mangrove in DEFAULT_MANGROVES:
        try:
            mangrove_repository.create_mangrove(mangrove["data_id"], mangrove["name"], "-", "-")
            created += 1
        except AlreadyExistsError:
            pass

    logger.info(f"Seed: DB ready, {created} default row(s) created")
    return created
