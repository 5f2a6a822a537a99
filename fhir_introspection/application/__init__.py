"""Application layer for FHIR introspection.

This layer contains the model inspector that builds the mapping index and
the summary models handed to presenters and exporters.
"""

from .models import ElementSummary, ImportResult, MappingSummary

# ModelInspector is not imported here: the mapping core imports the logging
# adapters, which import this package's ports.
#   from fhir_introspection.application.model_inspector import ModelInspector

__all__ = [
    "ElementSummary",
    "ImportResult",
    "MappingSummary",
]
