from beanie import Document
from pydantic import EmailStr, Field
from typing import Optional
from datetime import datetime, timezone
from .enums import UserRole


class User(Document):
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field("", alias="lastName")
    email: EmailStr
    password_hash: str = Field(..., alias="passwordHash")
    role: UserRole = UserRole.EDITOR

    is_active: bool = Field(True, alias="isActive")

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), alias="createdAt"
    )
    last_login: Optional[datetime] = Field(None, alias="lastLogin")

    class Settings:
        name = "users"

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
