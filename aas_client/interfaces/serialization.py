"""
Serialization interface (``/serialization``).

Exports selected shells and submodels, either as AASX package or as JSON
environment.
"""

import io
from http import HTTPStatus

from basyx.aas import model
from basyx.aas.adapter.json import read_aas_json_file

from aas_client.clients.transport import HttpTransport
from aas_client.exceptions import InvalidPayloadError
from aas_client.interfaces.base import AuthHeaderProvider, BaseInterface, validate_status_code
from aas_client.query.builder import resolve
from aas_client.query.search_criteria import SerializationSearchCriteria
from aas_client.schemas.files import InMemoryFile
from aas_client.utils import http_helper
from aas_client.utils.file_parser import parse_file_body
from aas_client.utils.http_helper import APPLICATION_JSON, HttpMethod

API_PATH = "/serialization"
ACCEPT = "Accept"
APPLICATION_AASX = "application/asset-administration-shell-package+xml"


class SerializationInterface(BaseInterface):
    def __init__(
        self,
        endpoint: str,
        transport: HttpTransport | None = None,
        auth_header_provider: AuthHeaderProvider | None = None,
    ):
        super().__init__(resolve(endpoint, API_PATH), transport, auth_header_provider)

    def _get_serialization(self, aas_ids: list[str], submodel_ids: list[str], accept: str):
        search_criteria = SerializationSearchCriteria(aas_ids=aas_ids, submodel_ids=submodel_ids)
        request = http_helper.create_get_request(
            self._uri(None, search_criteria=search_criteria),
            self._auth_header(),
            self.transport.timeout,
        )
        request.headers[ACCEPT] = accept
        response = self._send(request)
        validate_status_code(HttpMethod.GET, response, HTTPStatus.OK)
        return response

    def get_aasx_package(self, aas_ids: list[str], submodel_ids: list[str]) -> InMemoryFile:
        response = self._get_serialization(aas_ids, submodel_ids, APPLICATION_AASX)
        return parse_file_body(response)

    def get_environment(self, aas_ids: list[str], submodel_ids: list[str]) -> model.DictObjectStore:
        """
        Get the selected shells and submodels as JSON environment.

        Concept descriptions referenced by them are included by the service.
        """
        response = self._get_serialization(aas_ids, submodel_ids, APPLICATION_JSON)
        try:
            return read_aas_json_file(io.StringIO(response.text), failsafe=False)
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidPayloadError(f"failed to parse environment: {e}") from e
