from fastapi import APIRouter, HTTPException
from ..models.schemas import ParentResponse, TemplateResponse
from ..registry import resolve, resolve_parent

router = APIRouter(prefix="/templates", tags=["templates"])

@router.get("/{parent}", response_model=ParentResponse)
def get_parent(parent: str):
    templates = resolve_parent(parent)
    if templates is None:
        raise HTTPException(status_code=404, detail={"code": "PARENT_NOT_FOUND"})
    return ParentResponse(parent=parent, templates=templates)

@router.get("/{parent}/{name}", response_model=TemplateResponse)
def get_template(parent: str, name: str):
    template = resolve(parent, name)
    if template is None:
        raise HTTPException(status_code=404, detail={"code": "TEMPLATE_NOT_FOUND"})
    return TemplateResponse(parent=parent, name=name, template=template)
