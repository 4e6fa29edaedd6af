# mangrove_backend/api/resources/predict.py
from flask import request
from flask_restful import Resource
from ...services.prediction_service import PredictionService

class Predict(Resource):
    def __init__(self, model_repository):
        self.model_repository = model_repository

    def post(self):
        """Predict the class label of an uploaded mangrove image.
        ---
        tags:
          - Prediction
        consumes:
          - multipart/form-data
        parameters:
          - name: image
            in: formData
            type: file
            required: true
            description: The image file to predict.
        responses:
          200:
            description: Successfully predicted the class label.
            schema:
              type: object
              properties:
                dataId:
                  type: integer
                  description: The predicted data id.
                  default: 1
                name:
                  type: string
                  description: The predicted class label.
                  default: Mangrove A
                image:
                  type: string
                  description: The selected mangrove image.
                  default: https://sample
                description:
                  type: string
                  description: The descriptions.
                  default: Mangrove A is Foo Bar of Bazz
          500:
            description: Internal server error.
            schema:
              type: object
              properties:
                error:
                  type: string
        """
        try:
            if 'image' not in request.files:
                raise ValueError("No image provided")

            service = PredictionService(self.model_repository)
            return service.classify(request.files['image'].read()), 200
        except Exception as e:
            return {"error": str(e)}, 500
