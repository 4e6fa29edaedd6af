# mangrove_backend/api/docs.py
from flasgger import Swagger

SWAGGER_TEMPLATE = {
    "swagger": "2.0",
    "info": {
        "title": "Image Prediction API",
        "version": "1.0.0",
        "description": "API for predicting class labels of mangrove image",
    },
}

# Only the public JSON API is documented; the admin screens are not an API
SWAGGER_CONFIG = {
    "headers": [],
    "specs": [
        {
            "endpoint": "apispec",
            "route": "/api/swagger.json",
            "rule_filter": lambda rule: rule.rule.startswith("/api/v1/"),
            "model_filter": lambda tag: True,
        }
    ],
    "static_url_path": "/flasgger_static",
    "swagger_ui": True,
    "specs_route": "/api/swagger/",
}

def init_docs(app):
    return Swagger(app, template=SWAGGER_TEMPLATE, config=SWAGGER_CONFIG)
