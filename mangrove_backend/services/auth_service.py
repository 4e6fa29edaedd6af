# mangrove_backend/services/auth_service.py
from flask import current_app
from ..repositories.user_repository import UserRepository
from ..utils.exceptions import APIError
from ..utils.logger import setup_logger
import bcrypt

# bcrypt only looks at the first 72 bytes and newer releases reject longer input
MAX_PASSWORD_BYTES = 72

class AuthService:
    def __init__(self):
        self.user_repository = UserRepository()
        self.logger = setup_logger()

    def hash_password(self, password):
        rounds = current_app.config.get('BCRYPT_ROUNDS', 10)
        return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt(rounds=rounds)).decode('utf-8')

    def register(self, username, password):
        """Service: Register a new user"""
        username = (username or '').strip()
        if not username or not password:
            raise APIError("Username and password are required")
        if len(password.encode('utf-8')) > MAX_PASSWORD_BYTES:
            raise APIError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")

        try:
            user = self.user_repository.create_user(username, self.hash_password(password))
            self.logger.info(f"User registered: {username}")
            return user
        except Exception as e:
            self.logger.error(f"Registration failed: {str(e)}")
            raise

    def authenticate(self, username, password):
        """Service: Return the user matching the credentials, or None.

        Unknown usernames and wrong passwords are indistinguishable to the caller.
        """
        user = self.user_repository.get_user_by_username((username or '').strip())
        if not user or not password:
            self.logger.info(f"Login failed: {username}")
            return None

        # Decode stored password from database (stored as string) to bytes
        stored_password = user.password.encode('utf-8')
        try:
            matches = bcrypt.checkpw(password.encode('utf-8'), stored_password)
        except ValueError:
            matches = False
        if not matches:
            self.logger.info(f"Login failed: {username}")
            return None

        self.logger.info(f"User logged in: {username}")
        return user

    def get_user_by_id(self, user_id):
        """Service: Get user by ID"""
        return self.user_repository.get_user_by_id(user_id)

    def list_users(self):
        return self.user_repository.find_all_with_count()

    def delete_user(self, user):
        """Service: Delete a user"""
        username = user.username
        self.user_repository.delete_user(user)
        self.logger.info(f"User deleted: {username}")
