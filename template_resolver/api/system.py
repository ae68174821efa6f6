from fastapi import APIRouter
from ..models.schemas import StoreStatusResponse
from ..registry import store_status

router = APIRouter(prefix="/system", tags=["system"])


@router.get("/templates", response_model=StoreStatusResponse)
def template_store_status():
    """
    Report which file the shared store is bound to and what it last loaded.
    Does not reload the file.
    """
    return StoreStatusResponse(**store_status())
