import logging
from typing import Any, Dict, Optional, Protocol, Type

from pydantic import BaseModel, ValidationError

from app.core.errors import AdvisoryError, ResponseParseError
from app.models.advisory import AdvisoryForm, InlineMedia, ModuleId
from app.models.module_view import ModuleState, ModuleStatus
from app.services.advisory_modules import MODULES, AdvisoryModule, compose_prompt
from app.services.media import MediaSource, encode_media

logger = logging.getLogger(__name__)


class AdvisoryGateway(Protocol):
    async def query(
        self,
        prompt: str,
        response_schema: Type[BaseModel],
        media: Optional[InlineMedia] = None,
    ) -> Any: ...


class ModuleController:
    """
    Owns the request state of one advisory module.

    Every submission gets a sequence number. A reply that arrives after a newer
    submission was issued is dropped, so the view always reflects the latest request.
    """

    def __init__(self, module: AdvisoryModule, gateway: AdvisoryGateway) -> None:
        self.module = module
        self.gateway = gateway
        self.state = ModuleState()
        self._sequence = 0

    @property
    def is_loading(self) -> bool:
        return self.state.status == ModuleStatus.LOADING

    def reset(self) -> ModuleState:
        self._sequence += 1
        self.state = ModuleState(request_id=self._sequence)
        return self.state

    def _is_current(self, request_id: int) -> bool:
        return request_id == self._sequence

    def _coerce_result(self, result: Any) -> BaseModel:
        response_model = self.module.response_model
        if isinstance(result, response_model):
            return result
        try:
            return response_model.model_validate(result)
        except ValidationError as exc:
            raise ResponseParseError(
                f"La respuesta no cumple el esquema {response_model.__name__}."
            ) from exc

    def _error_message(self, exc: Exception) -> str:
        message = exc.message if isinstance(exc, AdvisoryError) else str(exc)
        return message or self.module.fallback_error

    async def submit(
        self, form: AdvisoryForm, media_source: Optional[MediaSource] = None
    ) -> ModuleState:
        self._sequence += 1
        request_id = self._sequence
        self.state = ModuleState(status=ModuleStatus.LOADING, request_id=request_id)

        try:
            prompt = compose_prompt(self.module, form)
            media = await encode_media(media_source) if media_source is not None else None
            raw_result = await self.gateway.query(prompt, self.module.response_model, media)
            result = self._coerce_result(raw_result)
        except Exception as exc:
            if not isinstance(exc, AdvisoryError):
                logger.exception("Unexpected failure in module %s", self.module.id.value)
            if not self._is_current(request_id):
                logger.info(
                    "Discarding stale failure for module %s (request %s, current %s)",
                    self.module.id.value,
                    request_id,
                    self._sequence,
                )
                return self.state
            self.state = ModuleState(
                status=ModuleStatus.FAILED,
                error=self._error_message(exc),
                error_kind=exc.kind if isinstance(exc, AdvisoryError) else None,
                request_id=request_id,
            )
            return self.state

        if not self._is_current(request_id):
            logger.info(
                "Discarding stale result for module %s (request %s, current %s)",
                self.module.id.value,
                request_id,
                self._sequence,
            )
            return self.state

        self.state = ModuleState(
            status=ModuleStatus.SUCCEEDED, result=result, request_id=request_id
        )
        return self.state


class ControllerRegistry:
    def __init__(self, gateway: AdvisoryGateway) -> None:
        self.gateway = gateway
        self.controllers: Dict[ModuleId, ModuleController] = {
            module_id: ModuleController(module, gateway)
            for module_id, module in MODULES.items()
        }

    def get(self, module_id: ModuleId) -> ModuleController:
        return self.controllers[module_id]
