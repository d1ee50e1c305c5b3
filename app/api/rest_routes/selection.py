from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_registry, get_selector
from app.models.module_view import DashboardView, SelectionState
from app.services.module_controller import ControllerRegistry
from app.services.module_selector import ModuleSelector
from app.services.presentation import render_dashboard

router = APIRouter(tags=["Selection"])


@router.get("/selection", response_model=SelectionState)
async def get_selection(selector: ModuleSelector = Depends(get_selector)):
    return SelectionState(module_id=selector.selected)


@router.put("/selection", response_model=SelectionState)
async def set_selection(
    request: SelectionState, selector: ModuleSelector = Depends(get_selector)
):
    """Select the active module. A null module_id goes back to the welcome view."""
    if request.module_id is None:
        selector.clear()
    else:
        selector.select(request.module_id)
    return SelectionState(module_id=selector.selected)


@router.delete("/selection", status_code=status.HTTP_204_NO_CONTENT)
async def clear_selection(selector: ModuleSelector = Depends(get_selector)):
    selector.clear()
    return


@router.get(
    "/dashboard",
    response_model=DashboardView,
    response_model_exclude_none=True,
)
async def get_dashboard(
    selector: ModuleSelector = Depends(get_selector),
    registry: ControllerRegistry = Depends(get_registry),
):
    """
    Get the view of the selected module, or the welcome view when nothing is selected.
    """
    return render_dashboard(selector, registry)
