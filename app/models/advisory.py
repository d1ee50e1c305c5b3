from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class ModuleId(str, Enum):
    MERCADO_NEGOCIO = "mercado-negocio"
    SABER_AGRICOLA = "saber-agricola"
    CREDITO_PROTECCION = "credito-proteccion"
    CLIMA_INTELIGENTE = "clima-inteligente"
    RED_AGRO = "red-agro"
    LOGISTICA_EXPORTACION = "logistica-exportacion"


# --- Response building blocks ---


class TitledContent(BaseModel):
    """A section rendered as a single paragraph."""

    title: str = Field(..., description="Clear, actionable section title in Spanish.")
    content: str = Field(..., description="Section body in Spanish.")


class TitledItems(BaseModel):
    """A section rendered as a bulleted list."""

    title: str = Field(..., description="Clear, actionable section title in Spanish.")
    items: List[str] = Field(..., description="Bullet points in Spanish.")


# --- Response schemas ---


class MercadoNegocioResponse(BaseModel):
    trends: TitledContent = Field(..., description="Current trends for the product.")
    prices: TitledContent = Field(..., description="Estimated price range.")
    buyers: TitledItems = Field(..., description="2-3 potential buyers.")
    requirements: TitledItems = Field(
        ..., description="1-2 important certifications or requirements."
    )
    differentiation: TitledContent = Field(
        ..., description="One way to differentiate the product."
    )


class SaberAgricolaResponse(BaseModel):
    diagnosis: TitledItems = Field(..., description="2-3 possible causes of the problem.")
    recommendations: TitledItems = Field(..., description="2-3 immediate actions.")
    training: TitledContent = Field(..., description="1-2 relevant courses or guides.")
    experts: TitledContent = Field(..., description="Local institution that can help.")


class CreditoProteccionResponse(BaseModel):
    financing: TitledItems = Field(
        ..., description="2-3 financial entities and product types."
    )
    requirements: TitledItems = Field(
        ..., description="3-4 general credit requirements."
    )
    insurance: TitledContent = Field(
        ..., description="Benefit of agricultural insurance and one option."
    )
    nextStep: TitledContent = Field(..., description="First practical step to take.")


class ClimaInteligenteResponse(BaseModel):
    forecast: TitledContent = Field(
        ..., description="Most likely climate risks for the next 2 weeks."
    )
    recommendations: TitledItems = Field(
        ..., description="2-3 adaptive management recommendations."
    )
    practice: TitledContent = Field(
        ..., description="One medium-term sustainable practice."
    )
    geolocation: TitledContent = Field(
        ..., description="Why plot geolocation matters for exports."
    )


class RedAgroResponse(BaseModel):
    connections: TitledContent = Field(
        ..., description="2 model organizations or cooperatives in the region."
    )
    draft: TitledContent = Field(..., description="Short forum message draft.")
    advice: TitledContent = Field(..., description="Advice on building alliances.")
    support: TitledContent = Field(..., description="Peruvian state support program.")


class LogisticaExportacionResponse(BaseModel):
    costing: TitledItems = Field(..., description="3-4 key export cost components.")
    documents: TitledItems = Field(..., description="2-3 essential documents.")
    phytosanitary: TitledContent = Field(
        ..., description="Most important phytosanitary requirement."
    )
    nextStep: TitledContent = Field(..., description="First vital practical step.")


# --- Form inputs ---


class CultivoMercado(str, Enum):
    CAFE = "Café"
    CACAO = "Cacao"
    BANANO = "Banano"
    PAPA = "Papa"
    MANGO = "Mango"
    UVA = "Uva"
    ESPARRAGO = "Espárrago"
    PALTA = "Palta"


class MercadoObjetivo(str, Enum):
    NACIONAL = "Nacional"
    INTERNACIONAL = "Internacional"


class InteresCapacitacion(str, Enum):
    AGRICULTURA_ORGANICA = "Agricultura orgánica"
    RIEGO_EFICIENTE = "Riego eficiente"
    POST_COSECHA = "Manejo post-cosecha"
    PLAGAS_ENFERMEDADES = "Manejo de plagas y enfermedades"
    GESTION_EMPRESARIAL = "Gestión empresarial"


class EtapaFenologica(str, Enum):
    SIEMBRA = "Siembra"
    CRECIMIENTO = "Crecimiento"
    FLORACION = "Floración"
    COSECHA = "Cosecha"


class AdvisoryForm(BaseModel):
    """Base class for module forms. Text fields are stripped and must not be blank."""

    model_config = ConfigDict(str_strip_whitespace=True)

    def prompt_variables(self) -> Dict[str, Any]:
        return {
            key: value.value if isinstance(value, Enum) else value
            for key, value in self.model_dump().items()
        }


class MercadoNegocioForm(AdvisoryForm):
    cultivo: CultivoMercado
    ubicacion: str = Field(..., min_length=1)
    mercado: MercadoObjetivo


class SaberAgricolaForm(AdvisoryForm):
    problema: str = Field(..., min_length=1)
    interes: InteresCapacitacion


class CreditoProteccionForm(AdvisoryForm):
    necesidad: float = Field(..., gt=0, description="Monto en S/")
    titulacion: bool = False
    seguro: bool = False

    def prompt_variables(self) -> Dict[str, Any]:
        amount = int(self.necesidad) if self.necesidad.is_integer() else self.necesidad
        return {
            "necesidad": amount,
            "titulacion": "Sí" if self.titulacion else "No",
            "seguro": "Sí" if self.seguro else "No",
        }


class ClimaInteligenteForm(AdvisoryForm):
    cultivo: str = Field(..., min_length=1)
    geolocalizacion: str = Field(..., min_length=1)
    etapa: EtapaFenologica


class RedAgroForm(AdvisoryForm):
    agrupacion: bool = False
    ubicacion: str = Field(..., min_length=1)
    servicio: str = ""

    def prompt_variables(self) -> Dict[str, Any]:
        return {
            "agrupacion": (
                "Busca unirse a una cooperativa/asociación"
                if self.agrupacion
                else "Busca ofrecer/encontrar un servicio"
            ),
            "ubicacion": self.ubicacion,
            "servicio": self.servicio,
        }


class LogisticaExportacionForm(AdvisoryForm):
    producto: str = Field(..., min_length=1)
    volumen: str = Field(..., min_length=1)
    destino: str = Field(..., min_length=1)


class InlineMedia(BaseModel):
    """Image bytes embedded directly in a Gemini request."""

    data: str = Field(..., description="Base64 encoded file contents.")
    mime_type: str
