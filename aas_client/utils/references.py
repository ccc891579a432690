"""
String serialization of AAS references.

Renders a reference in the text form defined by the AAS metamodel, e.g.
``[ModelRef](Submodel)urn:example:sm, (Property)temperature``.
"""

from basyx.aas import model
from basyx.aas.adapter._generic import KEY_TYPES

from aas_client.exceptions import InvalidPayloadError


def reference_to_string(reference: model.Reference) -> str:
    """
    Serialize a reference to its canonical string form.

    Args:
        reference: A BaSyx ModelReference or ExternalReference

    Returns:
        The reference string

    Raises:
        InvalidPayloadError: If the value is not a well-formed reference
    """
    if not isinstance(reference, model.Reference):
        raise InvalidPayloadError(
            f"expected a Reference, got {type(reference).__name__}"
        )
    if not reference.key:
        raise InvalidPayloadError("reference must contain at least one key")

    reference_type = "ModelRef" if isinstance(reference, model.ModelReference) else "ExternalRef"
    referred_semantic_id = getattr(reference, "referred_semantic_id", None)
    if referred_semantic_id is not None:
        prefix = f"[{reference_type}- {reference_to_string(referred_semantic_id)} -]"
    else:
        prefix = f"[{reference_type}]"

    return prefix + ", ".join(_key_to_string(key) for key in reference.key)


def _key_to_string(key: model.Key) -> str:
    try:
        key_type = KEY_TYPES[key.type]
    except KeyError as e:
        raise InvalidPayloadError(f"unsupported key type: {key.type!r}") from e
    return f"({key_type}){key.value}"
