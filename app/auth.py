import logging

import jwt
from fastapi import HTTPException, status
from pydantic import BaseModel

from .models.user import User
from .config import settings
from .db import init_beanie_if_needed

# Configure logging
logger = logging.getLogger(__name__)

SECRET_KEY = settings.JWT_SECRET_KEY
ALGORITHM = settings.JWT_ALGORITHM


class TokenData(BaseModel):
    email: str


class AuthService:
    @staticmethod
    def verify_token(token: str) -> TokenData:
        """Decode an access token issued by the auth service"""
        credentials_exception = HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

        try:
            payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        except jwt.ExpiredSignatureError:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Token has expired",
                headers={"WWW-Authenticate": "Bearer"},
            )
        except jwt.PyJWTError as e:
            logger.warning(f"Rejected token: {str(e)}")
            raise credentials_exception

        email = payload.get("email") or payload.get("sub")
        if not email or payload.get("type", "access") != "access":
            raise credentials_exception

        return TokenData(email=email)

    @staticmethod
    async def get_current_user(token: str) -> User:
        """Get current user from JWT token"""
        # Ensure database is initialized
        await init_beanie_if_needed()

        token_data = AuthService.verify_token(token)
        user = await User.find_one({"email": token_data.email})

        if user is None:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="User not found",
                headers={"WWW-Authenticate": "Bearer"},
            )

        if not user.is_active:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Inactive user"
            )

        return user
