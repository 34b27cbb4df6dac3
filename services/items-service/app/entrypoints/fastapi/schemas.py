from pydantic import BaseModel

class Health(BaseModel):
    status: str = "ok"

class Message(BaseModel):
    message: str

class ItemOut(BaseModel):
    id: int
    name: str
    description: str
