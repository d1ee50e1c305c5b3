from langchain_core.prompts import PromptTemplate

MERCADO_NEGOCIO_PROMPT = PromptTemplate.from_template(
    """
Actúa como un experto en agronegocios peruanos. Un productor ha proporcionado la siguiente información:
- Cultivo/Producto: {cultivo}
- Ubicación: {ubicacion}
- Mercado Objetivo: {mercado}

Basado en esta información, proporciona un análisis de mercado conciso y útil en formato JSON.
Debes proveer títulos claros y accionables para cada sección.
- trends: Describe las tendencias actuales para este producto.
- prices: Ofrece un rango de precios estimado.
- buyers: Nombra 2-3 compradores potenciales.
- requirements: Menciona 1-2 certificaciones o requisitos importantes.
- differentiation: Sugiere una forma de diferenciar su producto.
"""
)
