"""
Declarative descriptors for every Compare and Comply API operation.

Each operation is described once here; the invoker turns a descriptor and
a parameter bag into a RequestDescriptor. Nothing in this module performs
I/O.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

JSON = "application/json"
MULTIPART = "multipart/form-data"
OCTET_STREAM = "application/octet-stream"


class Destination(str, Enum):
    """Where a parameter ends up in the HTTP request."""

    PATH = "path"
    QUERY = "query"
    BODY = "body"
    FORM_DATA = "formData"


@dataclass(frozen=True)
class ParameterSpec:
    """
    One parameter of an operation.

    Attributes:
        name: Caller-facing Python name
        destination: Part of the request the value is routed to
        wire_name: Serialized field name, defaults to name
        required: Whether the invocation fails when the value is absent
        alias: camelCase spelling also accepted in parameter bags
        content_type: Fixed MIME type for a form file part
        content_type_param: Parameter holding a caller-chosen MIME type
            for a form file part
        is_file: Form field carries file content rather than a string
        describes: For a MIME type parameter, the file field it applies to
    """

    name: str
    destination: Destination
    wire_name: Optional[str] = None
    required: bool = False
    alias: Optional[str] = None
    content_type: Optional[str] = None
    content_type_param: Optional[str] = None
    is_file: bool = False
    describes: Optional[str] = None

    @property
    def key(self) -> str:
        return self.wire_name or self.name


@dataclass(frozen=True)
class OperationDescriptor:
    """Static shape of one API endpoint."""

    name: str
    method: str
    url: str
    params: Tuple[ParameterSpec, ...] = ()

    @property
    def required(self) -> Tuple[str, ...]:
        return tuple(p.name for p in self.params if p.required)

    @property
    def content_type(self) -> Optional[str]:
        """Default Content-Type, None for operations without a payload."""
        destinations = {p.destination for p in self.params}
        if Destination.FORM_DATA in destinations:
            return MULTIPART
        if Destination.BODY in destinations:
            return JSON
        return None

    def aliases(self) -> Dict[str, str]:
        """Map of accepted alternative spellings to parameter names."""
        return {p.alias: p.name for p in self.params if p.alias}


def _path(name: str, alias: Optional[str] = None) -> ParameterSpec:
    return ParameterSpec(name, Destination.PATH, required=True, alias=alias)


def _query(
    name: str,
    wire_name: Optional[str] = None,
    alias: Optional[str] = None,
    required: bool = False,
) -> ParameterSpec:
    return ParameterSpec(
        name, Destination.QUERY, wire_name=wire_name, required=required, alias=alias
    )


def _body(
    name: str, alias: Optional[str] = None, required: bool = False
) -> ParameterSpec:
    return ParameterSpec(name, Destination.BODY, required=required, alias=alias)


def _upload(
    name: str,
    wire_name: Optional[str] = None,
    content_type_param: Optional[str] = None,
) -> ParameterSpec:
    return ParameterSpec(
        name,
        Destination.FORM_DATA,
        wire_name=wire_name,
        required=True,
        content_type_param=content_type_param,
        is_file=True,
    )


def _credentials(name: str, alias: str) -> ParameterSpec:
    return ParameterSpec(
        name,
        Destination.FORM_DATA,
        required=True,
        alias=alias,
        content_type=JSON,
        is_file=True,
    )


def _form(name: str, alias: str) -> ParameterSpec:
    return ParameterSpec(name, Destination.FORM_DATA, required=True, alias=alias)


def _content_type(name: str, alias: str, field: str) -> ParameterSpec:
    return ParameterSpec(name, Destination.FORM_DATA, alias=alias, describes=field)


def _single_file_operation(name: str, url: str) -> OperationDescriptor:
    return OperationDescriptor(
        name,
        "POST",
        url,
        (
            _upload("file", content_type_param="file_content_type"),
            _content_type("file_content_type", "fileContentType", "file"),
            _query("model"),
        ),
    )


CONVERT_TO_HTML = _single_file_operation("convert_to_html", "/v1/html_conversion")

CLASSIFY_ELEMENTS = _single_file_operation(
    "classify_elements", "/v1/element_classification"
)

EXTRACT_TABLES = _single_file_operation("extract_tables", "/v1/tables")

COMPARE_DOCUMENTS = OperationDescriptor(
    "compare_documents",
    "POST",
    "/v1/comparison",
    (
        _upload("file1", "file_1", "file1_content_type"),
        _upload("file2", "file_2", "file2_content_type"),
        _content_type("file1_content_type", "file1ContentType", "file1"),
        _content_type("file2_content_type", "file2ContentType", "file2"),
        _query("file1_label", "file_1_label", "file1Label"),
        _query("file2_label", "file_2_label", "file2Label"),
        _query("model"),
    ),
)

ADD_FEEDBACK = OperationDescriptor(
    "add_feedback",
    "POST",
    "/v1/feedback",
    (
        _body("feedback_data", "feedbackData", required=True),
        _body("user_id", "userId"),
        _body("comment"),
    ),
)

LIST_FEEDBACK = OperationDescriptor(
    "list_feedback",
    "GET",
    "/v1/feedback",
    (
        _query("feedback_type", alias="feedbackType"),
        _query("before"),
        _query("after"),
        _query("document_title", alias="documentTitle"),
        _query("model_id", alias="modelId"),
        _query("model_version", alias="modelVersion"),
        _query("category_removed", alias="categoryRemoved"),
        _query("category_added", alias="categoryAdded"),
        _query("category_not_changed", alias="categoryNotChanged"),
        _query("type_removed", alias="typeRemoved"),
        _query("type_added", alias="typeAdded"),
        _query("type_not_changed", alias="typeNotChanged"),
        _query("page_limit", alias="pageLimit"),
        _query("cursor"),
        _query("sort"),
        _query("include_total", alias="includeTotal"),
    ),
)

GET_FEEDBACK = OperationDescriptor(
    "get_feedback",
    "GET",
    "/v1/feedback/{feedback_id}",
    (_path("feedback_id", "feedbackId"), _query("model")),
)

DELETE_FEEDBACK = OperationDescriptor(
    "delete_feedback",
    "DELETE",
    "/v1/feedback/{feedback_id}",
    (_path("feedback_id", "feedbackId"), _query("model")),
)

CREATE_BATCH = OperationDescriptor(
    "create_batch",
    "POST",
    "/v1/batches",
    (
        _query("function", alias="_function", required=True),
        _credentials("input_credentials_file", "inputCredentialsFile"),
        _form("input_bucket_location", "inputBucketLocation"),
        _form("input_bucket_name", "inputBucketName"),
        _credentials("output_credentials_file", "outputCredentialsFile"),
        _form("output_bucket_location", "outputBucketLocation"),
        _form("output_bucket_name", "outputBucketName"),
        _query("model"),
    ),
)

LIST_BATCHES = OperationDescriptor("list_batches", "GET", "/v1/batches")

GET_BATCH = OperationDescriptor(
    "get_batch", "GET", "/v1/batches/{batch_id}", (_path("batch_id", "batchId"),)
)

UPDATE_BATCH = OperationDescriptor(
    "update_batch",
    "PUT",
    "/v1/batches/{batch_id}",
    (
        _path("batch_id", "batchId"),
        _query("action", required=True),
        _query("model"),
    ),
)

OPERATIONS: Dict[str, OperationDescriptor] = {
    op.name: op
    for op in (
        CONVERT_TO_HTML,
        CLASSIFY_ELEMENTS,
        EXTRACT_TABLES,
        COMPARE_DOCUMENTS,
        ADD_FEEDBACK,
        LIST_FEEDBACK,
        GET_FEEDBACK,
        DELETE_FEEDBACK,
        CREATE_BATCH,
        LIST_BATCHES,
        GET_BATCH,
        UPDATE_BATCH,
    )
}


def get_operation(name: str) -> OperationDescriptor:
    """Look up an operation descriptor by name."""
    try:
        return OPERATIONS[name]
    except KeyError:
        raise ValueError(f"Unknown operation: {name}") from None
