from fastapi import HTTPException, Request, status

from app.models.advisory import ModuleId
from app.services.module_controller import ControllerRegistry, ModuleController
from app.services.module_selector import ModuleSelector


def get_registry(request: Request) -> ControllerRegistry:
    return request.app.state.registry


def get_selector(request: Request) -> ModuleSelector:
    return request.app.state.selector


def parse_module_id(module_id: str) -> ModuleId:
    try:
        return ModuleId(module_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Module {module_id} not found.",
        )


def get_controller(request: Request, module_id: str) -> ModuleController:
    return get_registry(request).get(parse_module_id(module_id))
