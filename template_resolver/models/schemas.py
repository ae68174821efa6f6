from pydantic import BaseModel
from typing import Dict, List, Optional

class TemplateResponse(BaseModel):
    parent: str
    name: str
    template: str

class ParentResponse(BaseModel):
    parent: str
    templates: Dict[str, str]

class StoreStatusResponse(BaseModel):
    """
    Cached state of the shared template store.
    """
    path: str
    last_load_time: Optional[int] = None
    loaded: bool
    parents: List[str]
