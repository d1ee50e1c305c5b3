from langchain_core.prompts import PromptTemplate

CLIMA_INTELIGENTE_PROMPT = PromptTemplate.from_template(
    """
Actúa como un experto en agrometeorología y adaptación al cambio climático en el contexto peruano. Un productor provee los siguientes datos de su parcela:
- Cultivo: {cultivo}
- Ubicación: {geolocalizacion}
- Etapa fenológica del cultivo: {etapa}

Genera un informe de "Clima Inteligente" en formato JSON con títulos claros y accionables:

- forecast: Describe los riesgos climáticos más probables para las próximas 2 semanas.
- recommendations: Ofrece 2-3 recomendaciones de manejo adaptativo específicas.
- practice: Recomienda una práctica agrícola sostenible a mediano plazo.
- geolocation: Explica brevemente la importancia de la geolocalización para exportaciones.
"""
)
