from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

# -------- Users / auth --------
class LoginCredentials(BaseModel):
    email: str
    password: str

class Credentials(BaseModel):
    name: str
    email: str
    password: str

    def to_login(self) -> LoginCredentials:
        return LoginCredentials(email=self.email, password=self.password)

class AuthResult(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    email: str
    token: Optional[str] = None

# -------- Notes --------
class NoteCreatePayload(BaseModel):
    title: str
    description: str
    category: str

class NoteUpdatePayload(BaseModel):
    title: str
    description: str
    category: str
    completed: bool

class Note(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1)
    title: str
    description: str
    category: str
    completed: Optional[bool] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

# -------- Envelopes --------
class Envelope(BaseModel):
    model_config = ConfigDict(extra="ignore")

    success: bool
    status: Optional[int] = None
    message: Optional[str] = None
    data: Any = None

class ErrorPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: Optional[str] = None
    code: Optional[int] = None
    status: Optional[int] = None
