# mangrove_backend/api/resources/configs.py
from flask_restful import Resource
from ...services.config_service import ConfigService

class Configs(Resource):
    def get(self):
        """Get configurations data.
        ---
        tags:
          - Config
        responses:
          200:
            description: Successfully get configs data.
            schema:
              type: object
              additionalProperties:
                type: string
              properties:
                key:
                  type: string
                  description: The pair of key-value from configs data.
                  default: 'value'
          500:
            description: Internal server error.
        """
        try:
            return ConfigService().as_dict(), 200
        except Exception as e:
            return {"error": str(e)}, 500
