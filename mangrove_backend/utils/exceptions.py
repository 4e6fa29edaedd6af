# mangrove_backend/utils/exceptions.py
from flask import jsonify

class APIError(Exception):
    status_code = 400

    def __init__(self, message, status_code=None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self):
        return {"error": self.message}

class AlreadyExistsError(APIError):
    """Raised when a unique column (username, key, data_id) would be duplicated."""
    status_code = 409

class ImageDecodeError(APIError):
    status_code = 500

class ModelNotConfiguredError(APIError):
    status_code = 500

class MetadataNotFoundError(APIError):
    """The model produced a class index with no matching mangrove row."""
    status_code = 500

def handle_api_error(error):
    response = {"error": str(error)} if not hasattr(error, 'to_dict') else error.to_dict()
    status_code = getattr(error, 'status_code', 500)
    return jsonify(response), status_code
