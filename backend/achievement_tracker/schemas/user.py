"""
Achievement Tracker - Student Schemas
Pydantic schemas for creating and returning students
"""
from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class StudentCreate(BaseModel):
    """Schema for registering a student."""
    name: Annotated[str, Field(min_length=1, max_length=200)]
    email: EmailStr
    grade: Annotated[str, Field(min_length=1, max_length=50)]


class StudentResponse(BaseModel):
    """Schema for student responses."""
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    name: str
    email: str
    grade: str
    created_at: datetime
