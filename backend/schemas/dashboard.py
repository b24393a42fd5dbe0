from pydantic import BaseModel

from models.summary import OpenTask


class TaskListResponse(BaseModel):
    items: list[OpenTask]
