from typing import Any, Dict, List, Optional

from fastapi import (
    APIRouter,
    Body,
    Depends,
    File,
    Form,
    HTTPException,
    Response,
    UploadFile,
    status,
)
from pydantic import ValidationError

from app.api.dependencies import get_controller, get_registry
from app.core.errors import ErrorKind
from app.models.advisory import InteresCapacitacion, ModuleId, SaberAgricolaForm
from app.models.module_view import ModuleState, ModuleStatus, ModuleSummary, ModuleView
from app.services.advisory_modules import MODULES
from app.services.module_controller import ControllerRegistry, ModuleController
from app.services.presentation import render_module_view, summarize_module

router = APIRouter(prefix="/modules", tags=["Modules"])

IMAGE_DATA_URL_FIELD = "image_data_url"

ERROR_STATUS_CODES = {
    ErrorKind.CONFIGURATION: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorKind.TRANSPORT: status.HTTP_502_BAD_GATEWAY,
    ErrorKind.PARSE: status.HTTP_502_BAD_GATEWAY,
    ErrorKind.MEDIA: status.HTTP_400_BAD_REQUEST,
}


def _respond(
    controller: ModuleController, state: ModuleState, response: Response
) -> ModuleView:
    if state.status == ModuleStatus.FAILED:
        response.status_code = ERROR_STATUS_CODES.get(
            state.error_kind, status.HTTP_500_INTERNAL_SERVER_ERROR
        )
    return render_module_view(controller.module, state)


@router.get("", response_model=List[ModuleSummary])
async def list_modules():
    """List the available advisory modules."""
    return [summarize_module(module) for module in MODULES.values()]


@router.post(
    "/saber-agricola/diagnosis",
    response_model=ModuleView,
    response_model_exclude_none=True,
)
async def submit_diagnosis(
    response: Response,
    problema: str = Form(...),
    interes: InteresCapacitacion = Form(...),
    image: Optional[UploadFile] = File(None),
    registry: ControllerRegistry = Depends(get_registry),
):
    """
    Submit the Saber Agrícola form as multipart/form-data with an optional crop image.
    """
    try:
        form = SaberAgricolaForm(problema=problema, interes=interes)
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=exc.errors(include_url=False, include_context=False),
        )

    controller = registry.get(ModuleId.SABER_AGRICOLA)
    media_source = image if image is not None and image.filename else None
    state = await controller.submit(form, media_source=media_source)
    return _respond(controller, state, response)


@router.get(
    "/{module_id}",
    response_model=ModuleView,
    response_model_exclude_none=True,
)
async def get_module_view(controller: ModuleController = Depends(get_controller)):
    """Get the current view of a module."""
    return render_module_view(controller.module, controller.state)


@router.post(
    "/{module_id}/advisory",
    response_model=ModuleView,
    response_model_exclude_none=True,
)
async def submit_advisory(
    response: Response,
    payload: Dict[str, Any] = Body(...),
    controller: ModuleController = Depends(get_controller),
):
    """
    Submit a module form as JSON and wait for the AI advisory.

    Saber Agrícola also accepts an optional `image_data_url` field.
    """
    payload = dict(payload)
    image_data_url = payload.pop(IMAGE_DATA_URL_FIELD, None)
    if image_data_url is not None and not controller.module.accepts_image:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Module {controller.module.id.value} does not accept images.",
        )
    if image_data_url is not None and not isinstance(image_data_url, str):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"{IMAGE_DATA_URL_FIELD} must be a data URL string.",
        )

    try:
        form = controller.module.form_model.model_validate(payload)
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=exc.errors(include_url=False, include_context=False),
        )

    state = await controller.submit(form, media_source=image_data_url or None)
    return _respond(controller, state, response)


@router.delete(
    "/{module_id}/state",
    response_model=ModuleView,
    response_model_exclude_none=True,
)
async def reset_module(controller: ModuleController = Depends(get_controller)):
    """Clear the result or error of a module."""
    state = controller.reset()
    return render_module_view(controller.module, state)
