from enum import Enum
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field, SerializeAsAny

from app.core.errors import ErrorKind
from app.models.advisory import ModuleId


class ModuleStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class ModuleState(BaseModel):
    status: ModuleStatus = Field(default=ModuleStatus.IDLE)
    result: Optional[SerializeAsAny[BaseModel]] = Field(default=None)
    error: Optional[str] = Field(default=None)
    error_kind: Optional[ErrorKind] = Field(default=None)
    request_id: int = Field(
        default=0, description="Sequence number of the submission that owns this state."
    )


# --- Display primitives ---


class InfoBlock(BaseModel):
    type: Literal["block"] = "block"
    content: str


class InfoList(BaseModel):
    type: Literal["list"] = "list"
    items: List[str]


class OutputSection(BaseModel):
    key: str
    title: str
    icon: str
    wide: bool = False
    body: Union[InfoBlock, InfoList] = Field(..., discriminator="type")


class ModuleSummary(BaseModel):
    id: ModuleId
    name: str
    description: str
    icon: str


class ModuleView(BaseModel):
    id: ModuleId
    title: str
    subtitle: str
    features: List[str]
    accepts_image: bool = False
    status: ModuleStatus
    placeholder: Optional[str] = None
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    sections: List[OutputSection] = Field(default_factory=list)


class WelcomeView(BaseModel):
    title: str
    message: str
    modules: List[ModuleSummary]


class SelectionState(BaseModel):
    module_id: Optional[ModuleId] = None


class DashboardView(BaseModel):
    module_id: Optional[ModuleId] = None
    welcome: Optional[WelcomeView] = None
    module: Optional[ModuleView] = None
