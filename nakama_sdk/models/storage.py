"""Pydantic models for the storage engine.

Contains both response shapes and the nested inputs used by the
read/write/delete storage requests.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from nakama_sdk.models.enums import ReadPermission, WritePermission

# =============================================================================
# Request Inputs
# =============================================================================


class ReadStorageObjectId(BaseModel):
    collection: str
    key: str
    user_id: str | None = None


class DeleteStorageObjectId(BaseModel):
    collection: str
    key: str
    version: str | None = None


class WriteStorageObject(BaseModel):
    """Object to write.

    `value` must be a JSON object encoded as a string. `version` enables
    optimistic concurrency: "*" only writes when the object does not exist.
    """

    collection: str
    key: str
    value: str
    version: str | None = None
    permission_read: ReadPermission | None = None
    permission_write: WritePermission | None = None


# =============================================================================
# Response Models
# =============================================================================


class StorageObject(BaseModel):
    collection: str
    key: str
    user_id: str | None = None
    value: str | None = None
    version: str | None = None
    permission_read: ReadPermission = ReadPermission.NO_READ
    permission_write: WritePermission = WritePermission.NO_WRITE
    create_time: datetime | None = None
    update_time: datetime | None = None


class StorageObjects(BaseModel):
    objects: list[StorageObject] = Field(default_factory=list)


class StorageObjectList(BaseModel):
    objects: list[StorageObject] = Field(default_factory=list)
    cursor: str | None = None


class StorageObjectAck(BaseModel):
    collection: str
    key: str
    version: str | None = None
    user_id: str | None = None


class StorageObjectAcks(BaseModel):
    acks: list[StorageObjectAck] = Field(default_factory=list)
