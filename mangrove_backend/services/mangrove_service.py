# mangrove_backend/services/mangrove_service.py
from ..repositories.mangrove_repository import MangroveRepository
from ..utils.exceptions import APIError
from ..utils.logger import setup_logger

class MangroveService:
    def __init__(self):
        self.repository = MangroveRepository()
        self.logger = setup_logger()

    @staticmethod
    def parse_form(form):
        """Pull the editable fields out of a submitted form."""
        try:
            data_id = int(form.get('dataId', ''))
        except ValueError:
            raise APIError("dataId must be an integer")
        if data_id < 0:
            raise APIError("dataId must not be negative")

        return {
            'data_id': data_id,
            'name': (form.get('name') or '').strip(),
            'image': (form.get('image') or '').strip(),
            'description': form.get('description') or '',
        }

    def get(self, mangrove_id):
        return self.repository.get_by_id(mangrove_id)

    def list_mangroves(self):
        return self.repository.find_all_with_count()

    def create(self, form):
        """Service: Create class metadata from a submitted form"""
        fields = self.parse_form(form)
        return self.repository.create_mangrove(**fields)

    def update(self, mangrove, form):
        """Service: Apply an edit form to existing class metadata"""
        fields = self.parse_form(form)
        return self.repository.update_mangrove(mangrove, **fields)

    def delete(self, mangrove):
        self.repository.delete_mangrove(mangrove)
