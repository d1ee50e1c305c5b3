from typing import List

from pydantic import BaseModel

from app.models.module_view import (
    DashboardView,
    InfoBlock,
    InfoList,
    ModuleState,
    ModuleStatus,
    ModuleSummary,
    ModuleView,
    OutputSection,
    WelcomeView,
)
from app.services.advisory_modules import MODULES, AdvisoryModule
from app.services.module_controller import ControllerRegistry
from app.services.module_selector import ModuleSelector

WELCOME_TITLE = "Bienvenido a AgroConecta Perú"
WELCOME_MESSAGE = (
    "Su plataforma integral para potenciar la agricultura peruana. "
    "Seleccione un módulo en el menú de la izquierda para comenzar."
)


def summarize_module(module: AdvisoryModule) -> ModuleSummary:
    return ModuleSummary(
        id=module.id,
        name=module.name,
        description=module.description,
        icon=module.icon,
    )


def render_sections(module: AdvisoryModule, result: BaseModel) -> List[OutputSection]:
    sections = []
    for layout in module.sections:
        part = getattr(result, layout.key)
        items = getattr(part, "items", None)
        if items is not None:
            body = InfoList(items=list(items))
        else:
            body = InfoBlock(content=part.content)
        sections.append(
            OutputSection(
                key=layout.key,
                title=part.title,
                icon=layout.icon,
                wide=layout.wide,
                body=body,
            )
        )
    return sections


def render_module_view(module: AdvisoryModule, state: ModuleState) -> ModuleView:
    """
    Builds what the module page shows for the given state.

    Loading hides both result and error. The placeholder is only shown while idle.
    """
    view = ModuleView(
        id=module.id,
        title=module.name,
        subtitle=module.subtitle,
        features=list(module.features),
        accepts_image=module.accepts_image,
        status=state.status,
    )
    if state.status == ModuleStatus.IDLE:
        view.placeholder = module.placeholder
    elif state.status == ModuleStatus.FAILED:
        view.error = state.error or module.fallback_error
        view.error_kind = state.error_kind
    elif state.status == ModuleStatus.SUCCEEDED and state.result is not None:
        view.sections = render_sections(module, state.result)
    return view


def render_welcome() -> WelcomeView:
    return WelcomeView(
        title=WELCOME_TITLE,
        message=WELCOME_MESSAGE,
        modules=[summarize_module(module) for module in MODULES.values()],
    )


def render_dashboard(
    selector: ModuleSelector, registry: ControllerRegistry
) -> DashboardView:
    module_id = selector.selected
    if module_id is None:
        return DashboardView(welcome=render_welcome())
    controller = registry.get(module_id)
    return DashboardView(
        module_id=module_id,
        module=render_module_view(controller.module, controller.state),
    )
