# inventory_api/services/users.py
import logging
from dataclasses import replace

from inventory_api.errors import AuthError, ConflictError, NotFoundError, ValidationError
from inventory_api.repositories.base import InventoryRepository, UserRecord
from inventory_api.schemas.user import ProfileUpdate
from inventory_api.utils.hashing import get_password_hash, verify_password

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, repository: InventoryRepository):
        self.repository = repository

    def authenticate(self, email: str, password: str) -> UserRecord:
        user = self.repository.find_user_by_email(email)
        # Same answer for unknown email and wrong password
        if user is None or not verify_password(password, user.password_hash):
            logger.warning(f"Failed login for {email}")
            raise AuthError("Invalid credentials")
        logger.info(f"User {user.id} logged in")
        return user

    def get_user(self, user_id: str) -> UserRecord:
        user = self.repository.get_user(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def update_profile(self, user_id: str, data: ProfileUpdate) -> UserRecord:
        with self.repository.transaction():
            user = self.get_user(user_id)
            updated = replace(user)

            if data.name:
                updated.name = data.name

            if data.email and data.email != user.email:
                other = self.repository.find_user_by_email(data.email)
                if other is not None and other.id != user.id:
                    raise ConflictError("Email already in use")
                updated.email = data.email

            if data.current_password and data.new_password:
                if not verify_password(data.current_password, user.password_hash):
                    raise ValidationError("Current password is incorrect")
                updated.password_hash = get_password_hash(data.new_password)

            self.repository.save_user(updated)

        logger.info(f"Profile of user {user_id} updated")
        return updated
