# mangrove_backend/services/prediction_service.py
from ..repositories.mangrove_repository import MangroveRepository
from ..utils.exceptions import MetadataNotFoundError
from ..utils.logger import setup_logger
from .image_service import ImageService

class PredictionService:
    def __init__(self, model_repository):
        self.model_repository = model_repository
        self.mangrove_repository = MangroveRepository()
        self.image_service = ImageService(model_repository.image_size)
        self.logger = setup_logger()

    def classify(self, image_bytes):
        """Service: Classify an uploaded image and return its mangrove metadata"""
        try:
            pixels = self.image_service.preprocess(image_bytes)
            class_idx = self.model_repository.predict(pixels)

            mangrove = self.mangrove_repository.get_by_data_id(class_idx)
            if mangrove is None:
                raise MetadataNotFoundError(f"No mangrove metadata for dataId {class_idx}")

            self.logger.info(f"Service: Classified image as {mangrove.name} (dataId={class_idx})")
            return mangrove.to_dict()
        except Exception as e:
            self.logger.error(f"Service: Prediction failed: {str(e)}")
            raise
