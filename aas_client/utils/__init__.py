"""
Utility modules for the AAS client.
"""

from aas_client.utils.encoding import base64_encode, base64_url_encode
from aas_client.utils.references import reference_to_string

__all__ = ["base64_encode", "base64_url_encode", "reference_to_string"]
