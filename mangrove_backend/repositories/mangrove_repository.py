# mangrove_backend/repositories/mangrove_repository.py
from sqlalchemy.exc import IntegrityError
from ..core.database import Mangrove
from .. import db
from ..utils.exceptions import AlreadyExistsError
from ..utils.logger import setup_logger

class MangroveRepository:
    def __init__(self):
        self.logger = setup_logger()

    def create_mangrove(self, data_id, name, image, description):
        """Repository: Create class metadata for a model output index"""
        try:
            mangrove = Mangrove(data_id=data_id, name=name, image=image, description=description)
            db.session.add(mangrove)
            db.session.commit()
            self.logger.info(f"Repository: Created mangrove {name} (dataId={data_id})")
            return mangrove
        except IntegrityError:
            db.session.rollback()
            raise AlreadyExistsError(f"Mangrove with dataId {data_id} already exists")
        except Exception as e:
            db.session.rollback()
            self.logger.error(f"Repository: Failed to create mangrove dataId={data_id}: {str(e)}")
            raise

    def get_by_data_id(self, data_id):
        """Repository: Get class metadata by model output index"""
        try:
            return Mangrove.query.filter_by(data_id=data_id).first()
        except Exception as e:
            self.logger.error(f"Repository: Failed to get mangrove dataId={data_id}: {str(e)}")
            raise

    def get_by_id(self, mangrove_id):
        return db.session.get(Mangrove, mangrove_id)

    def find_all_with_count(self):
        mangroves = Mangrove.query.order_by(Mangrove.data_id).all()
        return mangroves, len(mangroves)

    def update_mangrove(self, mangrove, **fields):
        """Repository: Update class metadata; moving onto a taken dataId is rejected"""
        mangrove_id = mangrove.id
        try:
            for name, value in fields.items():
                setattr(mangrove, name, value)
            db.session.commit()
            self.logger.info(f"Repository: Updated mangrove id={mangrove_id}")
            return mangrove
        except IntegrityError:
            db.session.rollback()
            raise AlreadyExistsError(f"Mangrove with dataId {fields.get('data_id')} already exists")
        except Exception as e:
            db.session.rollback()
            self.logger.error(f"Repository: Failed to update mangrove id={mangrove_id}: {str(e)}")
            raise

    def delete_mangrove(self, mangrove):
        mangrove_id = mangrove.id
        try:
            db.session.delete(mangrove)
            db.session.commit()
            self.logger.info(f"Repository: Deleted mangrove id={mangrove_id}")
        except Exception as e:
            db.session.rollback()
            self.logger.error(f"Repository: Failed to delete mangrove id={mangrove_id}: {str(e)}")
            raise
