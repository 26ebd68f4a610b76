"""
Schemas Pydantic para login de funcionários
"""
from pydantic import BaseModel, Field


class SessionCreate(BaseModel):
    email: str = Field(..., min_length=3, max_length=200)
    password: str = Field(..., min_length=1)


class SessionResponse(BaseModel):
    token: str
    employee_name: str
    expires_at: int
