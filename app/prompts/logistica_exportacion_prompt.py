from langchain_core.prompts import PromptTemplate

LOGISTICA_EXPORTACION_PROMPT = PromptTemplate.from_template(
    """
Actúa como un experto en logística y agroexportación peruana. Un productor quiere exportar y necesita una guía clara.
- Producto: {producto}
- Volumen: {volumen}
- País de Destino: {destino}

Analiza esta solicitud y proporciona una guía práctica y concisa en formato JSON, con títulos claros y accionables:

- costing: Estima 3-4 componentes clave del costo de exportación.
- documents: Lista 2-3 documentos esenciales para esta operación.
- phytosanitary: Describe el requisito fitosanitario más importante para este producto y destino.
- nextStep: Aconseja cuál es el primer paso práctico y vital que el productor debe tomar.
"""
)
