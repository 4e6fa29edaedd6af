# mangrove_backend/repositories/config_repository.py
from sqlalchemy.exc import IntegrityError
from ..core.database import ConfigItem
from .. import db
from ..utils.exceptions import AlreadyExistsError
from ..utils.logger import setup_logger

class ConfigRepository:
    def __init__(self):
        self.logger = setup_logger()

    def create_config(self, key, value, input_type='text'):
        """Repository: Create a config entry; the unique key index rejects duplicates"""
        try:
            config = ConfigItem(key=key, value=value, input=input_type)
            db.session.add(config)
            db.session.commit()
            self.logger.info(f"Repository: Created config {key}")
            return config
        except IntegrityError:
            db.session.rollback()
            raise AlreadyExistsError(f"Config {key} already exists")
        except Exception as e:
            db.session.rollback()
            self.logger.error(f"Repository: Failed to create config {key}: {str(e)}")
            raise

    def find_all_with_count(self):
        """Repository: List configs together with the total count"""
        try:
            configs = ConfigItem.query.order_by(ConfigItem.id).all()
            return configs, len(configs)
        except Exception as e:
            self.logger.error(f"Repository: Failed to list configs: {str(e)}")
            raise

    def update_values(self, values):
        """Repository: Set the value of each config named in `values`, in one commit"""
        try:
            updated = []
            for config in ConfigItem.query.filter(ConfigItem.key.in_(list(values))).all():
                config.value = values[config.key]
                updated.append(config.key)
            db.session.commit()
            self.logger.info(f"Repository: Updated configs {', '.join(updated) or '(none)'}")
            return updated
        except Exception as e:
            db.session.rollback()
            self.logger.error(f"Repository: Failed to update configs: {str(e)}")
            raise
