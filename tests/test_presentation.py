import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))
sys.path.insert(0, str(Path(__file__).resolve().parent))

from advisory_fixtures import StubGateway, sample_response
from app.core.errors import ErrorKind
from app.models.advisory import ModuleId
from app.models.module_view import InfoBlock, InfoList, ModuleState, ModuleStatus
from app.services.advisory_modules import MODULES
from app.services.module_controller import ControllerRegistry
from app.services.module_selector import ModuleSelector
from app.services.presentation import (
    render_dashboard,
    render_module_view,
    render_welcome,
)


class RenderModuleViewTests(unittest.TestCase):
    def setUp(self) -> None:
        self.module = MODULES[ModuleId.SABER_AGRICOLA]
        self.result = sample_response(self.module.response_model)

    def test_loading_hides_result_and_error(self) -> None:
        state = ModuleState(
            status=ModuleStatus.LOADING, result=self.result, error="viejo"
        )
        view = render_module_view(self.module, state)
        self.assertEqual(view.status, ModuleStatus.LOADING)
        self.assertEqual(view.sections, [])
        self.assertIsNone(view.error)
        self.assertIsNone(view.placeholder)

    def test_failed_view_shows_error_only(self) -> None:
        state = ModuleState(
            status=ModuleStatus.FAILED, error="sin conexión", error_kind=ErrorKind.TRANSPORT
        )
        view = render_module_view(self.module, state)
        self.assertEqual(view.error, "sin conexión")
        self.assertEqual(view.error_kind, ErrorKind.TRANSPORT)
        self.assertEqual(view.sections, [])

    def test_succeeded_view_uses_display_primitives(self) -> None:
        state = ModuleState(status=ModuleStatus.SUCCEEDED, result=self.result)
        view = render_module_view(self.module, state)

        self.assertTrue(view.accepts_image)
        self.assertEqual(
            [section.key for section in view.sections],
            ["diagnosis", "recommendations", "training", "experts"],
        )
        diagnosis, _, training, _ = view.sections
        self.assertIsInstance(diagnosis.body, InfoList)
        self.assertEqual(diagnosis.body.items, self.result.diagnosis.items)
        self.assertEqual(diagnosis.icon, "diagnosis")
        self.assertIsInstance(training.body, InfoBlock)
        self.assertEqual(training.body.content, self.result.training.content)

    def test_idle_view_carries_module_copy(self) -> None:
        view = render_module_view(self.module, ModuleState())
        self.assertEqual(view.title, "Saber Agrícola")
        self.assertEqual(len(view.features), 4)
        self.assertEqual(view.placeholder, self.module.placeholder)


class DashboardTests(unittest.TestCase):
    def test_welcome_lists_every_module(self) -> None:
        welcome = render_welcome()
        self.assertEqual([m.id for m in welcome.modules], list(MODULES))
        self.assertEqual(welcome.modules[2].name, "Crédito & Protección")

    def test_dashboard_follows_selection(self) -> None:
        selector = ModuleSelector()
        registry = ControllerRegistry(StubGateway())

        self.assertIsNotNone(render_dashboard(selector, registry).welcome)

        selector.select(ModuleId.LOGISTICA_EXPORTACION)
        dashboard = render_dashboard(selector, registry)
        self.assertIsNone(dashboard.welcome)
        self.assertEqual(dashboard.module.title, "Logística & Exportación")

        selector.clear()
        self.assertIsNone(render_dashboard(selector, registry).module)


if __name__ == "__main__":
    unittest.main()
