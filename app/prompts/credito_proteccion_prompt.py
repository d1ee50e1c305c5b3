from langchain_core.prompts import PromptTemplate

CREDITO_PROTECCION_PROMPT = PromptTemplate.from_template(
    """
Actúa como un asesor financiero especializado en el sector agrícola de Perú. Un productor ha compartido sus necesidades:
- Necesidad de crédito: S/ {necesidad}
- Tiene titulación de tierras: {titulacion}
- Interesado en seguro agrícola: {seguro}

Analiza esta información y proporciona una recomendación clara en formato JSON, con títulos claros y accionables:

- financing: Sugiere 2-3 entidades financieras y tipos de producto.
- requirements: Lista 3-4 requisitos generales para el crédito.
- insurance: Explica brevemente el beneficio de un seguro y sugiere una opción.
- nextStep: Aconseja cuál sería el primer paso práctico que debería dar.
"""
)
