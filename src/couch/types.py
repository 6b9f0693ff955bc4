from typing import Any, NotRequired, TypedDict


class ErrorResponse(TypedDict):
    error: str
    reason: str


class DatabaseInfoCluster(TypedDict):
    n: int
    q: int
    r: int
    w: int


class DatabaseInfoSizes(TypedDict):
    active: int
    file: int
    external: int


class DatabaseInfoProps(TypedDict, total=False):
    partitioned: bool


class DatabaseInfo(TypedDict):
    cluster: DatabaseInfoCluster
    compact_running: bool
    db_name: str
    disk_format_version: int
    doc_count: int
    doc_del_count: int
    instance_start_time: str
    purge_seq: str
    sizes: DatabaseInfoSizes
    update_seq: str
    props: NotRequired[DatabaseInfoProps]


class DatabaseResponse(TypedDict):
    ok: bool
    error: NotRequired[str]
    reason: NotRequired[str]


class DatabaseCreateOptions(TypedDict, total=False):
    q: int
    n: int
    partitioned: bool


class BulkDocItem(TypedDict):
    id: str
    ok: NotRequired[bool]
    rev: NotRequired[str]
    error: NotRequired[str]
    reason: NotRequired[str]


class FindRequest(TypedDict, total=False):
    selector: dict[str, Any]
    limit: int
    skip: int
    sort: list[dict[str, str]]
    fields: list[str]
    use_index: str | list[str]
    r: int
    bookmark: str
    update: bool
    stable: bool
    conflicts: bool
    execution_stats: bool


class FindExecutionStats(TypedDict):
    total_keys_examined: int
    total_docs_examined: int
    total_quorum_docs_examined: int
    results_returned: int
    execution_time_ms: float


class FindResponse(TypedDict):
    docs: list[dict[str, Any]]
    bookmark: NotRequired[str]
    execution_stats: NotRequired[FindExecutionStats]
    warning: NotRequired[str]


class AllDocsOptions(TypedDict, total=False):
    conflicts: bool
    descending: bool
    endkey: str
    endkey_docid: str
    include_docs: bool
    inclusive_end: bool
    key: str
    keys: list[str]
    limit: int
    skip: int
    startkey: str
    startkey_docid: str
    update_seq: bool


class AllDocsRow(TypedDict):
    id: str
    key: str
    value: dict[str, Any]
    doc: NotRequired[dict[str, Any] | None]


class AllDocsResponse(TypedDict):
    offset: NotRequired[int]
    rows: list[AllDocsRow]
    total_rows: int
    update_seq: NotRequired[str]


class DocumentResponse(TypedDict):
    ok: bool
    id: NotRequired[str]
    rev: NotRequired[str]


class DocumentGetOptions(TypedDict, total=False):
    rev: str
    revs: bool
    revs_info: bool
    latest: bool
    conflicts: bool
    deleted_conflicts: bool
    local_seq: bool
    meta: bool


class DocumentPutOptions(TypedDict, total=False):
    rev: str
    batch: str  # "ok" for batch mode


class ViewOptions(TypedDict, total=False):
    conflicts: bool
    descending: bool
    endkey: Any
    endkey_docid: str
    group: bool
    group_level: int
    include_docs: bool
    inclusive_end: bool
    key: Any
    keys: list[Any]
    limit: int
    reduce: bool
    skip: int
    sorted: bool
    stable: bool
    stale: str
    startkey: Any
    startkey_docid: str
    update: str
    update_seq: bool


class ViewRow(TypedDict):
    id: NotRequired[str]
    key: Any
    value: Any
    doc: NotRequired[dict[str, Any] | None]


class ViewResponse(TypedDict):
    offset: NotRequired[int]
    total_rows: NotRequired[int]
    rows: list[ViewRow]
    update_seq: NotRequired[str]


class User(TypedDict):
    _id: NotRequired[str]
    _rev: NotRequired[str]
    name: str
    type: str
    roles: list[str]
    password: NotRequired[str]
    salt: NotRequired[str]
    derived_key: NotRequired[str]
    iterations: NotRequired[int]
    password_scheme: NotRequired[str]
    pbkdf2_prf: NotRequired[str]


class UserResponse(TypedDict):
    ok: bool
    id: str
    rev: str


class LoginResponse(TypedDict):
    ok: bool
    name: str | None
    roles: list[str]


class AuthInfo(TypedDict):
    authenticated: NotRequired[str]
    authentication_db: NotRequired[str]
    authentication_handlers: list[str]


class UserContext(TypedDict):
    name: str | None
    roles: list[str]


class SessionInfo(TypedDict):
    ok: bool
    info: AuthInfo
    userCtx: UserContext


class Members(TypedDict):
    names: list[str]
    roles: list[str]


class SecurityObject(TypedDict):
    admins: Members
    members: Members


class UUIDsResponse(TypedDict):
    uuids: list[str]


class ServerVendor(TypedDict):
    name: str
    version: NotRequired[str]


class ServerInfo(TypedDict):
    couchdb: str
    version: str
    git_sha: NotRequired[str]
    uuid: NotRequired[str]
    features: NotRequired[list[str]]
    vendor: NotRequired[ServerVendor]
