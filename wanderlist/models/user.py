"""
User model - Credentials and the saved want-to-go list.
"""
from pydantic import BaseModel, Field


class User(BaseModel):
    """
    A registered user as stored in the ``users`` collection.
    
    The password is kept verbatim. It must be replaced by a salted
    one-way hash with constant-time comparison before any real deployment.
    """
    username: str = Field(..., description="Unique user name")
    password: str = Field(..., description="Password as submitted at registration")
    want_to_go_list: list[str] = Field(
        default_factory=list,
        alias="wantToGoList",
        description="Saved destination names, in insertion order"
    )
    
    class Config:
        populate_by_name = True
    
    def check_password(self, password: str) -> bool:
        """Plain string comparison against the stored password."""
        return self.password == password
    
    def to_document(self) -> dict:
        """Document shape written on registration (no list until first add)."""
        return {"username": self.username, "password": self.password}
