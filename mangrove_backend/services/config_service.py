# mangrove_backend/services/config_service.py
from ..repositories.config_repository import ConfigRepository
from ..utils.logger import setup_logger

class ConfigService:
    def __init__(self):
        self.repository = ConfigRepository()
        self.logger = setup_logger()

    def as_dict(self):
        """Service: All configs as a flat key -> value mapping"""
        configs, _ = self.repository.find_all_with_count()
        return {config.key: config.value for config in configs}

    def list_configs(self):
        configs, _ = self.repository.find_all_with_count()
        return configs

    def bulk_update(self, form):
        """Service: Update every existing config whose key was submitted with a non-empty value.

        Unknown keys in the form are ignored; configs are never created here.
        """
        configs, _ = self.repository.find_all_with_count()
        values = {c.key: form[c.key] for c in configs if form.get(c.key)}
        if not values:
            return []
        return self.repository.update_values(values)
