"""Pydantic models for CouchDB ``_users`` documents."""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

USER_DOC_PREFIX = "org.couchdb.user:"


class UserCreate(BaseModel):
    """Model for the body of an account creation request."""

    name: str = Field(description="Account name")
    password: str = Field(description="Plaintext password, hashed by the server")
    roles: List[str] = Field(default_factory=list, description="Role names")
    type: Literal["user"] = "user"


class UserRecord(BaseModel):
    """Model for a user document as returned by the server.

    The password is never part of a read; the server only returns the
    derived key material. Fields the server adds beyond these are kept.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: Optional[str] = Field(None, alias="_id", description="Document id")
    rev: Optional[str] = Field(None, alias="_rev", description="Revision token")
    name: Optional[str] = None
    roles: List[str] = Field(default_factory=list)
    type: str = "user"
    password_scheme: Optional[str] = None
    iterations: Optional[int] = None
    derived_key: Optional[str] = None
    salt: Optional[str] = None
    pbkdf2_prf: Optional[str] = None
