from typing import Optional

from app.models.advisory import ModuleId


class ModuleSelector:
    """Holds which module is active. No selection means the welcome view."""

    def __init__(self) -> None:
        self.selected: Optional[ModuleId] = None

    def select(self, module_id: ModuleId) -> Optional[ModuleId]:
        self.selected = module_id
        return self.selected

    def clear(self) -> None:
        self.selected = None
