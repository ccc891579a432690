"""
Interface for a single submodel and its submodel elements.

Submodel elements are addressed by idShort paths, e.g. ``Nameplate.Address``
or ``Documents[0].File``.
"""

from datetime import timedelta
from http import HTTPStatus
from typing import Any

from basyx.aas import model

from aas_client.interfaces.base import BaseInterface
from aas_client.query.modifiers import Content, Level, PagingInfo, QueryModifier
from aas_client.schemas.files import InMemoryFile, TypedInMemoryFile
from aas_client.schemas.page import Page

SUBMODEL_ELEMENTS_PATH = "/submodel-elements"


def submodel_element_path(id_short_path: str) -> str:
    return f"{SUBMODEL_ELEMENTS_PATH}/{id_short_path}"


def attachment_path(id_short_path: str) -> str:
    return submodel_element_path(id_short_path) + "/attachment"


def invoke_path(id_short_path: str) -> str:
    return submodel_element_path(id_short_path) + "/invoke"


def _duration(timeout: timedelta) -> str:
    """ISO 8601 duration in seconds, e.g. PT30S."""
    seconds = timeout.total_seconds()
    if seconds == int(seconds):
        return f"PT{int(seconds)}S"
    return f"PT{seconds}S"


class SubmodelInterface(BaseInterface):
    """
    Operations on one submodel, addressed by its endpoint
    (e.g. ``.../submodels/<base64url(id)>``).
    """

    def get(self, modifier: QueryModifier | None = None) -> model.Submodel:
        return self._get(None, Content.DEFAULT, modifier)

    def put(self, submodel: model.Submodel) -> None:
        self._put(None, submodel, modifier=QueryModifier(level=Level.DEEP))

    def patch(self, submodel: model.Submodel) -> None:
        self._patch(None, submodel, modifier=QueryModifier(level=Level.CORE))

    def get_metadata(self, modifier: QueryModifier | None = None) -> model.Submodel:
        return self._get(None, Content.METADATA, modifier)

    def patch_metadata(self, submodel: model.Submodel, modifier: QueryModifier | None = None) -> None:
        self._patch(None, submodel, Content.METADATA, modifier)

    def get_value(self, modifier: QueryModifier | None = None) -> Any:
        """Value-only representation of the submodel as plain JSON."""
        return self._get(None, Content.VALUE, modifier)

    def patch_value(self, value: Any, modifier: QueryModifier | None = None) -> None:
        self._patch(None, value, Content.VALUE, modifier)

    def get_reference(self) -> dict:
        return self._get(None, Content.REFERENCE, QueryModifier.MINIMAL)

    def get_path(self, modifier: QueryModifier | None = None) -> list[str]:
        return self._get(None, Content.PATH, modifier)

    def get_all_elements(self, modifier: QueryModifier | None = None) -> list[model.SubmodelElement]:
        return self._get_all(SUBMODEL_ELEMENTS_PATH, modifier=modifier)

    def get_elements(
        self,
        paging_info: PagingInfo,
        modifier: QueryModifier | None = None,
    ) -> Page:
        return self._get_page(SUBMODEL_ELEMENTS_PATH, modifier=modifier, paging_info=paging_info)

    def get_elements_metadata(self, paging_info: PagingInfo, modifier: QueryModifier | None = None) -> Page:
        return self._get_page(SUBMODEL_ELEMENTS_PATH, Content.METADATA, modifier, paging_info)

    def get_elements_reference(self, paging_info: PagingInfo, modifier: QueryModifier | None = None) -> Page:
        return self._get_page(SUBMODEL_ELEMENTS_PATH, Content.REFERENCE, modifier, paging_info)

    def get_elements_path(self, paging_info: PagingInfo, modifier: QueryModifier | None = None) -> Page:
        return self._get_page(SUBMODEL_ELEMENTS_PATH, Content.PATH, modifier, paging_info)

    def post_element(self, element: model.SubmodelElement, id_short_path: str | None = None) -> model.SubmodelElement:
        """Create an element at top level, or below ``id_short_path``."""
        if id_short_path is None:
            return self._post(SUBMODEL_ELEMENTS_PATH, element)
        return self._post(submodel_element_path(id_short_path), element)

    def get_element(self, id_short_path: str, modifier: QueryModifier | None = None) -> model.SubmodelElement:
        return self._get(submodel_element_path(id_short_path), Content.DEFAULT, modifier)

    def put_element(self, id_short_path: str, element: model.SubmodelElement) -> None:
        self._put(submodel_element_path(id_short_path), element)

    def patch_element(self, id_short_path: str, element: model.SubmodelElement) -> None:
        self._patch(submodel_element_path(id_short_path), element)

    def delete_element(self, id_short_path: str) -> None:
        self._delete(submodel_element_path(id_short_path))

    def get_element_metadata(self, id_short_path: str) -> model.SubmodelElement:
        return self._get(submodel_element_path(id_short_path), Content.METADATA)

    def patch_element_metadata(self, id_short_path: str, element: model.SubmodelElement) -> None:
        self._patch(submodel_element_path(id_short_path), element, modifier=QueryModifier(level=Level.CORE))

    def get_element_value(self, id_short_path: str, modifier: QueryModifier | None = None) -> Any:
        return self._get(submodel_element_path(id_short_path), Content.VALUE, modifier)

    def patch_element_value(self, id_short_path: str, value: Any) -> None:
        self._patch(submodel_element_path(id_short_path), value, Content.VALUE)

    def get_element_reference(self, id_short_path: str) -> dict:
        return self._get(submodel_element_path(id_short_path), Content.REFERENCE, QueryModifier(level=Level.CORE))

    def get_element_path(self, id_short_path: str) -> list[str]:
        return self._get(submodel_element_path(id_short_path), Content.PATH, QueryModifier(level=Level.DEEP))

    def get_attachment(self, id_short_path: str) -> InMemoryFile:
        return self._get_file(attachment_path(id_short_path))

    def put_attachment(self, id_short_path: str, attachment: TypedInMemoryFile) -> None:
        self._put_file(attachment_path(id_short_path), attachment)

    def delete_attachment(self, id_short_path: str) -> None:
        self._delete(attachment_path(id_short_path), HTTPStatus.OK)

    def invoke_operation_sync(
        self,
        id_short_path: str,
        input_arguments: list[model.SubmodelElement],
        inoutput_arguments: list[model.SubmodelElement] | None = None,
        timeout: timedelta = timedelta(seconds=30),
    ) -> dict:
        """
        Invoke an operation synchronously.

        Returns:
            The operation result as plain JSON
        """
        operation_request = {
            "inputArguments": [{"value": argument} for argument in input_arguments],
            "inoutputArguments": [{"value": argument} for argument in inoutput_arguments or []],
            "clientTimeoutDuration": _duration(timeout),
        }
        return self._post(invoke_path(id_short_path), operation_request, expected=HTTPStatus.OK)
