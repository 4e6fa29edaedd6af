# mangrove_backend/config/settings.py
import os
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv()

def database_uri(value):
    """Accept a SQLAlchemy URL or, as older deployments set it, a bare SQLite file path."""
    if '://' in value:
        return value
    return f"sqlite:///{os.path.abspath(value)}"

class Config:
    BASE_DIR = os.path.abspath(os.path.dirname(__file__))
    LOGS_PATH = os.getenv('LOGS_PATH', os.path.join(BASE_DIR, '../../logs'))

    HOST = os.getenv('HOST', '0.0.0.0')
    PORT = int(os.getenv('PORT', 3000))

    # Path or http(s) URL of a Keras file or TF.js model.json; required for /api/v1/predict
    MODEL_URL = os.getenv('MODEL_URL')
    IMAGE_SIZE = 150

    # Relative sqlite URLs resolve inside the Flask instance folder; bare paths against the cwd
    SQLALCHEMY_DATABASE_URI = database_uri(os.getenv('DATABASE_URL', 'sqlite:///db.sqlite'))
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    SECRET_KEY = os.getenv('SECRET', 'secret')
    SESSION_COOKIE_NAME = 'LOGIN_ID'
    SESSION_COOKIE_HTTPONLY = True
    PERMANENT_SESSION_LIFETIME = timedelta(days=2)

    BCRYPT_ROUNDS = int(os.getenv('BCRYPT_ROUNDS', 10))
    ADMIN_USERNAME = os.getenv('ADMIN_USERNAME', 'admin')
    ADMIN_PASSWORD = os.getenv('ADMIN_PASSWORD', 'admin')
    SEED_DEFAULTS = True

    CORS_ORIGINS = [o.strip() for o in os.getenv('CORS_ORIGINS', '*').split(',') if o.strip()]
    DEBUG = os.getenv('FLASK_DEBUG', 'False') == 'True'

    MAX_UPLOAD_SIZE = int(os.getenv("MAX_UPLOAD_SIZE", 10 * 1024 * 1024))  # 10MB
