from typing import Dict, List, Type

from langchain_core.prompts import PromptTemplate
from pydantic import BaseModel, ConfigDict

from app.models.advisory import (
    AdvisoryForm,
    ClimaInteligenteForm,
    ClimaInteligenteResponse,
    CreditoProteccionForm,
    CreditoProteccionResponse,
    LogisticaExportacionForm,
    LogisticaExportacionResponse,
    MercadoNegocioForm,
    MercadoNegocioResponse,
    ModuleId,
    RedAgroForm,
    RedAgroResponse,
    SaberAgricolaForm,
    SaberAgricolaResponse,
)
from app.prompts.clima_inteligente_prompt import CLIMA_INTELIGENTE_PROMPT
from app.prompts.credito_proteccion_prompt import CREDITO_PROTECCION_PROMPT
from app.prompts.logistica_exportacion_prompt import LOGISTICA_EXPORTACION_PROMPT
from app.prompts.mercado_negocio_prompt import MERCADO_NEGOCIO_PROMPT
from app.prompts.red_agro_prompt import RED_AGRO_PROMPT
from app.prompts.saber_agricola_prompt import SABER_AGRICOLA_PROMPT


class SectionLayout(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    icon: str
    wide: bool = False


class AdvisoryModule(BaseModel):
    """Declarative configuration of one advisory module."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    id: ModuleId
    name: str
    subtitle: str
    description: str
    icon: str
    features: List[str]
    placeholder: str
    fallback_error: str
    form_model: Type[AdvisoryForm]
    response_model: Type[BaseModel]
    prompt: PromptTemplate
    sections: List[SectionLayout]
    accepts_image: bool = False


def compose_prompt(module: AdvisoryModule, form: AdvisoryForm) -> str:
    return module.prompt.format(**form.prompt_variables())


MODULES: Dict[ModuleId, AdvisoryModule] = {
    ModuleId.MERCADO_NEGOCIO: AdvisoryModule(
        id=ModuleId.MERCADO_NEGOCIO,
        name="Mercado & Negocio",
        subtitle="Inteligencia de Mercados y Comercialización para impulsar sus ventas.",
        description="Tendencias, precios y compradores para su producto.",
        icon="market",
        features=[
            "Análisis de Tendencias de Mercado en tiempo real.",
            "Requisitos de Acceso a Mercados (Normativas y Certificaciones).",
            "Conexión directa con Compradores nacionales e internacionales.",
            "Identificación de Oportunidades de Diferenciación y nichos.",
        ],
        placeholder="Los resultados de su análisis aparecerán aquí.",
        fallback_error="Ocurrió un error al generar el análisis.",
        form_model=MercadoNegocioForm,
        response_model=MercadoNegocioResponse,
        prompt=MERCADO_NEGOCIO_PROMPT,
        sections=[
            SectionLayout(key="trends", icon="trend"),
            SectionLayout(key="prices", icon="price-tag"),
            SectionLayout(key="differentiation", icon="lightbulb"),
            SectionLayout(key="buyers", icon="target"),
            SectionLayout(key="requirements", icon="checklist", wide=True),
        ],
    ),
    ModuleId.SABER_AGRICOLA: AdvisoryModule(
        id=ModuleId.SABER_AGRICOLA,
        name="Saber Agrícola",
        subtitle=(
            "Su centro de Asistencia Técnica y Capacitación. "
            "Potenciado con diagnóstico por imagen."
        ),
        description="Diagnóstico de plagas por imagen y capacitación técnica.",
        icon="book",
        features=[
            "Herramientas para diagnóstico de plagas y enfermedades con IA visual.",
            "Biblioteca de Mejores Prácticas agrícolas.",
            "Cursos y tutoriales online en video e infografías.",
            "Conexión con expertos del INIA y la Red CITE.",
        ],
        placeholder="Sus recomendaciones personalizadas aparecerán aquí.",
        fallback_error="Ocurrió un error al buscar soluciones.",
        form_model=SaberAgricolaForm,
        response_model=SaberAgricolaResponse,
        prompt=SABER_AGRICOLA_PROMPT,
        sections=[
            SectionLayout(key="diagnosis", icon="diagnosis"),
            SectionLayout(key="recommendations", icon="action"),
            SectionLayout(key="training", icon="book"),
            SectionLayout(key="experts", icon="expert"),
        ],
        accepts_image=True,
    ),
    ModuleId.CREDITO_PROTECCION: AdvisoryModule(
        id=ModuleId.CREDITO_PROTECCION,
        name="Crédito & Protección",
        subtitle="Acceso a Financiamiento y Seguros para asegurar su inversión.",
        description="Opciones de crédito agrícola y seguros para su campaña.",
        icon="bank",
        features=[
            "Información detallada sobre líneas de crédito de Agrobanco, cajas rurales, etc.",
            "Asistencia para simplificar la solicitud de créditos y seguros.",
            "Contenido de educación financiera para mejorar la gestión.",
            "Guías para la formalización y titulación de tierras.",
        ],
        placeholder="Sus opciones de crédito y seguro sugeridas aparecerán aquí.",
        fallback_error="Ocurrió un error al buscar opciones.",
        form_model=CreditoProteccionForm,
        response_model=CreditoProteccionResponse,
        prompt=CREDITO_PROTECCION_PROMPT,
        sections=[
            SectionLayout(key="financing", icon="bank"),
            SectionLayout(key="requirements", icon="checklist"),
            SectionLayout(key="insurance", icon="shield"),
            SectionLayout(key="nextStep", icon="next-step"),
        ],
    ),
    ModuleId.CLIMA_INTELIGENTE: AdvisoryModule(
        id=ModuleId.CLIMA_INTELIGENTE,
        name="Clima Inteligente",
        subtitle="Herramientas para la Adaptación al Cambio Climático.",
        description="Alertas agrometeorológicas y prácticas de adaptación.",
        icon="cloud",
        features=[
            "Pronósticos Agrometeorológicos detallados y localizados.",
            "Recomendaciones de adaptación (manejo de agua, variedades, etc.).",
            "Monitoreo de salud del suelo y biodiversidad.",
            "Geolocalización de parcelas para cumplir normativas de exportación.",
        ],
        placeholder="Sus alertas y guías climáticas aparecerán aquí.",
        fallback_error="Ocurrió un error al generar el pronóstico.",
        form_model=ClimaInteligenteForm,
        response_model=ClimaInteligenteResponse,
        prompt=CLIMA_INTELIGENTE_PROMPT,
        sections=[
            SectionLayout(key="forecast", icon="cloud", wide=True),
            SectionLayout(key="recommendations", icon="action"),
            SectionLayout(key="practice", icon="leaf"),
            SectionLayout(key="geolocation", icon="gps", wide=True),
        ],
    ),
    ModuleId.RED_AGRO: AdvisoryModule(
        id=ModuleId.RED_AGRO,
        name="Red Agro",
        subtitle="Plataforma de Colaboración y Alianzas para crecer juntos.",
        description="Cooperativas, alianzas y programas de apoyo en su región.",
        icon="handshake",
        features=[
            "Directorio de Organizaciones de Productores a nivel nacional.",
            "Foros de discusión para compartir experiencias y resolver dudas.",
            "Facilitador de Alianzas Público-Privadas (AGRORURAL, AGROIDEAS).",
            "Espacio para compartir recursos (maquinaria, transporte).",
        ],
        placeholder="Las conexiones y oportunidades sugeridas aparecerán aquí.",
        fallback_error="Ocurrió un error al publicar en la red.",
        form_model=RedAgroForm,
        response_model=RedAgroResponse,
        prompt=RED_AGRO_PROMPT,
        sections=[
            SectionLayout(key="connections", icon="network"),
            SectionLayout(key="draft", icon="pencil"),
            SectionLayout(key="advice", icon="handshake"),
            SectionLayout(key="support", icon="gov"),
        ],
    ),
    ModuleId.LOGISTICA_EXPORTACION: AdvisoryModule(
        id=ModuleId.LOGISTICA_EXPORTACION,
        name="Logística & Exportación",
        subtitle="Guía para simplificar y planificar su proceso de exportación.",
        description="Costos, documentos y requisitos fitosanitarios para exportar.",
        icon="ship",
        features=[
            "Estimación de costos de la cadena logística de exportación.",
            "Identificación de requisitos de acceso y certificaciones por mercado.",
            "Generación de checklists de documentación necesaria.",
            "Conexión con operadores logísticos y agentes de aduana.",
        ],
        placeholder="Su guía de exportación personalizada aparecerá aquí.",
        fallback_error="Ocurrió un error al generar la guía.",
        form_model=LogisticaExportacionForm,
        response_model=LogisticaExportacionResponse,
        prompt=LOGISTICA_EXPORTACION_PROMPT,
        sections=[
            SectionLayout(key="costing", icon="cost"),
            SectionLayout(key="documents", icon="document"),
            SectionLayout(key="phytosanitary", icon="shield"),
            SectionLayout(key="nextStep", icon="next-step"),
        ],
    ),
}
