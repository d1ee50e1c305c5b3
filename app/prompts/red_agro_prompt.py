from langchain_core.prompts import PromptTemplate

RED_AGRO_PROMPT = PromptTemplate.from_template(
    """
Actúa como un facilitador de redes y alianzas para el sector agrícola peruano. Un productor está buscando conectarse:
- Interés: {agrupacion}
- Ubicación: {ubicacion}
- Detalles adicionales: "{servicio}"

Con esta información, genera una respuesta en formato JSON que fomente la colaboración, usando títulos claros y accionables:

- connections: Sugiere 2 tipos de organizaciones o cooperativas modelo en la región.
- draft: Crea un borrador de mensaje corto y efectivo para un foro.
- advice: Ofrece un consejo práctico sobre cómo establecer alianzas exitosas.
- support: Menciona un programa estatal peruano de apoyo (AGROIDEAS, AGRORURAL).
"""
)
