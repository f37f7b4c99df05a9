# inventory_api/routes/auth.py
from dataclasses import asdict

from fastapi import APIRouter, Depends

from inventory_api.dependencies import get_user_service
from inventory_api.repositories.base import UserRecord
from inventory_api.services.users import UserService
from inventory_api.utils.tokenJWT import get_current_user, token_for_user
from inventory_api.schemas import user as schemas

router = APIRouter(prefix="/api/auth", tags=["Auth"])

# Authenticate user and issue JWT token
@router.post("/login", response_model=schemas.LoginResponse)
def login(payload: schemas.UserLogin, service: UserService = Depends(get_user_service)):
    user = service.authenticate(payload.email, payload.password)
    return {
        "message": "Login successful",
        "user": asdict(user),
        "token": token_for_user(user),
    }


# Retrieve current authenticated user details
@router.get("/me", response_model=schemas.UserResponse)
def me(current_user: UserRecord = Depends(get_current_user)):
    return current_user


# Update name, email or password of the current user
@router.put("/me", response_model=schemas.ProfileResponse)
def update_me(
    payload: schemas.ProfileUpdate,
    current_user: UserRecord = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    user = service.update_profile(current_user.id, payload)
    return {"message": "Profile updated successfully", "user": asdict(user)}
