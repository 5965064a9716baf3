"""Processadores registrados: regra de casamento + executor.

Para adicionar um processador:
1. Crie o módulo com um factory `create_*_processor`
2. Inclua-o em app/bootstrap/processors.py
"""

from app.processors.glens_playground import (
    GLENS_PLAYGROUND_PROCESSOR_ID,
    create_glens_playground_processor,
)
from app.processors.small_business_acquisition import (
    SMALL_BUSINESS_ACQUISITION_PROCESSOR_ID,
    create_small_business_acquisition_processor,
)
from app.processors.vancouver_house import (
    VANCOUVER_HOUSE_PROCESSOR_ID,
    create_vancouver_house_processor,
)

__all__ = [
    "GLENS_PLAYGROUND_PROCESSOR_ID",
    "SMALL_BUSINESS_ACQUISITION_PROCESSOR_ID",
    "VANCOUVER_HOUSE_PROCESSOR_ID",
    "create_glens_playground_processor",
    "create_small_business_acquisition_processor",
    "create_vancouver_house_processor",
]
