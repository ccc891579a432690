"""
Resource interfaces of the AAS HTTP API.
"""

from aas_client.interfaces.aas import AASInterface
from aas_client.interfaces.aas_registry import AASRegistryInterface
from aas_client.interfaces.aas_repository import AASRepositoryInterface
from aas_client.interfaces.base import BaseInterface, ServiceInterface, validate_status_code
from aas_client.interfaces.concept_description_repository import ConceptDescriptionRepositoryInterface
from aas_client.interfaces.description import DescriptionInterface
from aas_client.interfaces.discovery import AASBasicDiscoveryInterface
from aas_client.interfaces.serialization import SerializationInterface
from aas_client.interfaces.submodel import SubmodelInterface
from aas_client.interfaces.submodel_registry import SubmodelRegistryInterface
from aas_client.interfaces.submodel_repository import SubmodelRepositoryInterface

__all__ = [
    "AASBasicDiscoveryInterface",
    "AASInterface",
    "AASRegistryInterface",
    "AASRepositoryInterface",
    "BaseInterface",
    "ConceptDescriptionRepositoryInterface",
    "DescriptionInterface",
    "SerializationInterface",
    "ServiceInterface",
    "SubmodelInterface",
    "SubmodelRegistryInterface",
    "SubmodelRepositoryInterface",
    "validate_status_code",
]
